"""JSON Schema export."""

from joydoc.schema.export import export_json_schema, validate_with_json_schema

__all__ = ["export_json_schema", "validate_with_json_schema"]
