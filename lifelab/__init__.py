"""lifelab — personal life-experiment tracker."""
