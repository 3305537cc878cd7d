"""Validation handlers for JoyDoc."""

import json
import logging
from pathlib import Path

import yaml

from joydoc.core.validator import JoyDocValidator
from joydoc.schema.export import export_json_schema


logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_document(doc, doc_path: str | None):
    """Load document from a decoded value or a .json/.yaml/.yml file path"""
    if doc is not None:
        return doc
    if doc_path:
        path = Path(doc_path)
        if not path.exists():
            raise FileNotFoundError(f"Document file not found: {doc_path}")
        with open(path, encoding="utf-8") as f:
            try:
                if path.suffix.lower() in YAML_SUFFIXES:
                    return yaml.safe_load(f)
                return json.load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise ValueError(f"Could not parse {doc_path}: {e}") from e
    raise ValueError("Either 'doc' or 'doc_path' must be provided")


def validate_document(validator: JoyDocValidator, args: dict) -> dict:
    """Validate a complete JoyDoc document"""
    doc = load_document(args.get("doc"), args.get("doc_path"))
    result = validator.validate(doc)
    logger.info("Validated %s: valid=%s", args.get("doc_path") or "<document>", result.valid)

    return {
        **result.to_dict(),
        "violation_count": len(result.violations),
        "warning_count": len(result.warnings),
    }


def validate_schema_fragment(validator: JoyDocValidator, args: dict) -> dict:
    """Validate a collection schema map or a logic block on its own"""
    if "schema" in args:
        result = validator.validate_schema(args["schema"])
    elif "logic" in args:
        result = validator.validate_logic(args["logic"], args.get("condition_contract", "field"))
    else:
        return {"error": "Either 'schema' or 'logic' is required"}

    return {
        **result.to_dict(),
        "violation_count": len(result.violations),
        "warning_count": len(result.warnings),
    }


def export_schema(validator: JoyDocValidator, args: dict) -> dict:
    """Export the JSON Schema, optionally writing it to output_path"""
    schema = export_json_schema(args.get("version"))

    output_path = args.get("output_path")
    if output_path:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2, ensure_ascii=False)
        return {"schema": schema, "output_path": str(path)}

    return {"schema": schema}


# Handler registry for this module
HANDLERS = {
    "validate_document": validate_document,
    "validate_schema_fragment": validate_schema_fragment,
    "export_schema": export_schema,
}
