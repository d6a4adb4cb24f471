"""Tests for the bundled JSON Schema loader."""

import pytest

from wyntine_verifier.models import json_schema_loader
from wyntine_verifier.models.json_schema_loader import clear_cache, get_schema_path, load_schema


@pytest.fixture(autouse=True)
def empty_cache():
    clear_cache()
    yield
    clear_cache()


class TestSchemaLoader:
    def test_catalog_schema_path(self):
        path = get_schema_path("catalog")
        assert path.name == "catalog.json"
        assert path.exists()

    def test_catalog_schema_requires_errors(self):
        schema = load_schema("catalog")
        assert "errors" in schema["required"]

    def test_schema_is_cached(self):
        first = load_schema("catalog")
        assert load_schema("catalog") is first
        assert "catalog" in json_schema_loader._SCHEMA_CACHE

    def test_clear_cache(self):
        first = load_schema("catalog")
        clear_cache()
        assert load_schema("catalog") is not first

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does-not-exist")
