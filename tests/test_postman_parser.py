from pathlib import Path

import pytest

from postman_openapi.errors import CollectionError
from postman_openapi.parser.base import Collection
from postman_openapi.parser.postman import load_collection, parse_collection

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadCollection:
    def test_load_sample(self):
        c = load_collection(FIXTURES / "sample.postman.json")
        assert c.info.name == "Sample API"
        assert [i.name for i in c.item] == ["Users", "Login", "Health", "Ping"]

    def test_nested_folders(self):
        c = load_collection(FIXTURES / "sample.postman.json")
        users = c.item[0]
        assert users.request is None
        assert users.item[3].item[0].name == "Upload"

    def test_invalid_json(self, tmp_path):
        f = tmp_path / "broken.json"
        f.write_text("{not json", encoding="utf-8")
        with pytest.raises(CollectionError, match="not valid JSON"):
            load_collection(f)


class TestParseCollection:
    def test_model_passthrough(self):
        c = Collection()
        assert parse_collection(c) is c

    def test_rejects_non_object(self):
        with pytest.raises(CollectionError):
            parse_collection([1, 2, 3])

    def test_rejects_wrong_item_type(self):
        with pytest.raises(CollectionError, match="Invalid collection"):
            parse_collection({"item": "nope"})

    def test_collection_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_collection({"item": [{"name": "x", "request": {"method": "GET", "url": 5}}]})
