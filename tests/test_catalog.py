"""Tests for catalog loading and settings."""

from __future__ import annotations

import json

import pytest

from lifelab.catalog import CatalogError, load_catalog
from lifelab.config import Settings

CATALOG = {
    "categories": [
        {
            "id": "sleep",
            "title": "Sleep",
            "subcategories": [
                {"id": "bedtime", "title": "Bedtime", "prompts": ["Lights out by 11?"]}
            ],
        },
        {"id": "mind", "title": "Mind"},
    ]
}


class TestLoadCatalog:
    def test_no_path(self):
        assert load_catalog(None) is None

    def test_missing_file(self, tmp_path):
        assert load_catalog(tmp_path / "nope.json") is None

    def test_object_form(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG), encoding="utf-8")
        catalog = load_catalog(path)
        assert catalog.titles == {"Sleep", "Mind"}
        assert catalog.categories[0].subcategories[0].prompts == ["Lights out by 11?"]

    def test_bare_list_form(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG["categories"]), encoding="utf-8")
        assert [c.id for c in load_catalog(path).categories] == ["sleep", "mind"]

    def test_malformed_raises(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_wrong_shape_raises(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"categories": [{"title": "No id"}]}), encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_bare_list_with_leading_whitespace(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("\n  " + json.dumps([{"id": "mind", "title": "Mind"}]), encoding="utf-8")
        assert load_catalog(path).titles == {"Mind"}

    def test_bare_list_wrong_shape_raises(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"id": "sleep"}]), encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_bare_list_trailing_garbage_raises(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('[{"id": "sleep", "title": "Sleep"}] ]', encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)


class TestSettings:
    def test_db_path_under_data_dir(self, settings: Settings):
        assert settings.db_path == settings.data_dir / "lifelab.db"

    def test_ensure_data_dir(self, settings: Settings):
        settings.ensure_data_dir()
        assert settings.data_dir.is_dir()

    def test_local_timezone_by_default(self, settings: Settings):
        assert settings.tzinfo is None
