"""Tests for the handler registry and validation handlers"""

import json

import pytest

from joydoc.handlers import HANDLERS, get_handler, list_handlers
from joydoc.handlers.validation import (
    export_schema,
    load_document,
    validate_document,
    validate_schema_fragment,
)


class TestLoadDocument:

    def test_inline_document_returned(self, minimal_doc):
        assert load_document(minimal_doc, None) is minimal_doc

    def test_json_file(self, fixtures_dir):
        doc = load_document(None, str(fixtures_dir / "minimal.json"))
        assert doc["files"][0]["_id"] == "f1"

    def test_yaml_file(self, fixtures_dir):
        doc = load_document(None, str(fixtures_dir / "minimal.yaml"))
        assert doc == load_document(None, str(fixtures_dir / "minimal.json"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(None, str(tmp_path / "nope.json"))

    def test_unparsable_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Could not parse"):
            load_document(None, str(path))

    def test_nothing_given(self):
        with pytest.raises(ValueError):
            load_document(None, None)


class TestValidationHandlers:

    def test_validate_document_inline(self, validator, minimal_doc):
        result = validate_document(validator, {"doc": minimal_doc})
        assert result["valid"] is True
        assert result["violation_count"] == 0
        json.dumps(result)

    def test_validate_document_path(self, validator, fixtures_dir):
        result = validate_document(validator, {"doc_path": str(fixtures_dir / "future_properties.json")})
        assert result["valid"] is True
        assert result["warning_count"] == 2

    def test_validate_document_invalid(self, validator, minimal_doc):
        minimal_doc["files"] = []
        result = validate_document(validator, {"doc": minimal_doc})
        assert result["valid"] is False
        assert result["violations"][0]["path"] == "files"

    def test_validate_schema_fragment(self, validator, collection_field):
        result = validate_schema_fragment(validator, {"schema": collection_field["schema"]})
        assert result["valid"] is True

    def test_validate_logic_fragment(self, validator):
        result = validate_schema_fragment(validator, {
            "logic": {"action": "show", "eval": "and", "conditions": [{"schema": "s1"}]},
            "condition_contract": "schema",
        })
        assert result["valid"] is False
        assert result["violation_count"] == 2

    def test_fragment_requires_input(self, validator):
        assert "error" in validate_schema_fragment(validator, {})

    def test_export_schema(self, validator, tmp_path):
        output = tmp_path / "out" / "joyfill-schema.json"
        result = export_schema(validator, {"version": "2.0.0", "output_path": str(output)})
        assert result["schema"]["$joyfillSchemaVersion"] == "2.0.0"
        with open(output) as f:
            assert json.load(f) == result["schema"]


class TestRegistry:

    def test_handlers_registered(self):
        assert set(list_handlers()) == {"validate_document", "validate_schema_fragment", "export_schema"}

    def test_get_handler(self):
        assert get_handler("validate_document") is HANDLERS["validate_document"]
        assert get_handler("unknown") is None
