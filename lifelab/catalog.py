"""Load the optional seed category catalog from a JSON file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import TypeAdapter, ValidationError

from lifelab.models.catalog import Category, CategoryCatalog

if TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger()

_CATEGORY_LIST = TypeAdapter(list[Category])


class CatalogError(Exception):
    """The catalog file exists but could not be parsed."""


def load_catalog(path: Path | None) -> CategoryCatalog | None:
    """Read a catalog file; ``None`` when no path is set or the file is missing.

    Accepts either ``{"categories": [...]}`` or a bare list of categories.
    """
    if path is None or not path.exists():
        return None

    raw = path.read_text(encoding="utf-8")
    try:
        if raw.lstrip().startswith("["):
            catalog = CategoryCatalog(categories=_CATEGORY_LIST.validate_json(raw))
        else:
            catalog = CategoryCatalog.model_validate_json(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid category catalog {path}: {exc}") from exc

    logger.debug("Catalog loaded", path=str(path), categories=len(catalog.categories))
    return catalog
