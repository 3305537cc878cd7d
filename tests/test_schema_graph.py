"""Tests for collection schema map validation"""

import pytest

from joydoc.core.context import ValidationContext
from joydoc.core.errors import MISSING_REQUIRED, TYPE_MISMATCH
from joydoc.core.validator import JoyDocValidator


@pytest.fixture
def schema(collection_field):
    return collection_field["schema"]


class TestSchemaNodes:

    def test_valid_schema(self, validator, schema):
        result = validator.validate_schema(schema)
        assert result.valid
        assert result.warnings == []

    def test_empty_schema_valid(self, validator):
        result = validator.validate_schema({})
        assert result.valid
        assert result.warnings == []

    def test_schema_must_be_object(self, validator):
        result = validator.validate_schema(["s1"])
        assert not result.valid
        assert result.paths == ["root"]

    def test_node_must_be_object(self, validator, schema):
        schema["s2"] = "child"
        result = validator.validate_schema(schema)
        assert not result.valid
        assert result.paths == ["s2"]

    def test_table_columns_required(self, validator, schema):
        del schema["s2"]["tableColumns"]
        result = validator.validate_schema(schema)
        assert not result.valid
        assert result.paths == ["s2.tableColumns"]
        assert result.violations[0].kind == MISSING_REQUIRED

    def test_table_columns_resolved_per_type(self, validator, schema):
        schema["s1"]["tableColumns"].append({"_id": "c9", "type": "number", "value": "ten"})
        result = validator.validate_schema(schema)
        assert not result.valid
        assert result.paths == ["s1.tableColumns[1].value"]

    def test_table_column_missing_id(self, validator, schema):
        schema["s1"]["tableColumns"][0] = {"type": "text"}
        result = validator.validate_schema(schema)
        assert result.paths == ["s1.tableColumns[0]._id"]

    def test_children_must_be_strings(self, validator, schema):
        schema["s1"]["children"] = ["s2", 3]
        result = validator.validate_schema(schema)
        assert not result.valid
        assert result.paths == ["s1.children[1]"]
        assert result.violations[0].kind == TYPE_MISMATCH

    def test_root_must_be_boolean(self, validator, schema):
        schema["s1"]["root"] = "yes"
        result = validator.validate_schema(schema)
        assert result.paths == ["s1.root"]

    def test_schema_logic_validated(self, validator, schema):
        schema["s2"]["logic"] = {"action": "show", "eval": "and", "conditions": [{"schema": "s1"}]}
        result = validator.validate_schema(schema)
        assert not result.valid
        assert set(result.paths) == {
            "s2.logic.conditions[0].column",
            "s2.logic.conditions[0].condition",
        }

    def test_cycles_are_not_traversed(self, validator, schema):
        """children only has to be strings; a cycle is fine"""
        schema["s2"]["children"] = ["s1"]
        schema["s1"]["children"] = ["s1", "s2"]
        assert validator.validate_schema(schema).valid

    def test_path_prefix_inside_document(self, validator, doc_with, collection_field):
        collection_field["schema"]["s2"]["children"] = "s1"
        result = validator.validate(doc_with([collection_field]))
        assert result.paths == ["fields[0].schema.s2.children"]


class TestSchemaAdvisories:

    def test_no_root_warns(self, validator, schema):
        schema["s1"]["root"] = False
        result = validator.validate_schema(schema)
        assert result.valid
        assert [w.code for w in result.warnings] == ["SCH-001"]
        assert result.warnings[0].actual == 0

    def test_two_roots_warn(self, validator, schema):
        schema["s2"]["root"] = True
        result = validator.validate_schema(schema)
        assert result.valid
        assert [w.code for w in result.warnings] == ["SCH-001"]
        assert sorted(result.warnings[0].valid_options) == ["s1", "s2"]

    def test_missing_child_warns(self, validator, schema):
        schema["s1"]["children"] = ["s2", "s3"]
        result = validator.validate_schema(schema)
        assert result.valid
        assert [(w.code, w.path) for w in result.warnings] == [("REF-005", "s1.children[1]")]

    def test_schema_logic_unknown_targets_warn(self, validator, schema):
        schema["s2"]["logic"] = {
            "action": "show",
            "eval": "and",
            "conditions": [
                {"schema": "s9", "column": "c1", "condition": "="},
                {"schema": "s1", "column": "c9", "condition": "="},
            ],
        }
        result = validator.validate_schema(schema)
        assert result.valid
        assert [(w.code, w.path) for w in result.warnings] == [
            ("REF-006", "s2.logic.conditions[0].schema"),
            ("REF-006", "s2.logic.conditions[1].column"),
        ]

    def test_advisories_can_be_disabled(self, schema):
        schema["s1"]["root"] = False
        schema["s1"]["children"] = ["s3"]
        validator = JoyDocValidator(ValidationContext(check_references=False, warn_schema_root=False))
        result = validator.validate_schema(schema)
        assert result.valid
        assert result.warnings == []
