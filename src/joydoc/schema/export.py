"""JSON Schema export of the JoyDoc entity contracts.

The exported schema (draft-07) expresses the same rules as JoyDocValidator:
open objects, required attributes, JSON kinds, non-empty identifiers, one
file container per document, and per-``type`` variant rules applied with
``if``/``then`` so that unknown field and column types only see the base
rules. Advisory checks (references, root count, documented values) have no
counterpart in the schema.
"""

import logging
import math
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.validators import extend

from joydoc import __version__
from joydoc.core.errors import (
    ARITY,
    MISSING_REQUIRED,
    STRUCTURAL,
    TYPE_MISMATCH,
    ValidationResult,
    Violation,
)
from joydoc.core.model import (
    ARRAY,
    BOOLEAN,
    CONTRACTS,
    FILES_ARITY,
    NULL,
    NUMBER,
    OBJECT,
    STRING,
    EntityContract,
    TypeSpec,
)
from joydoc.core.resolver import COLUMN_UNION, FIELD_UNION, DiscriminatedUnion


logger = logging.getLogger(__name__)

DRAFT_07 = "http://json-schema.org/draft-07/schema#"


def _is_finite_number(checker, instance) -> bool:
    """Draft-07 ``number`` without NaN and the infinities."""
    if not Draft7Validator.TYPE_CHECKER.is_type(instance, "number"):
        return False
    return not isinstance(instance, float) or math.isfinite(instance)


# Decoded JSON can carry NaN/Infinity; JoyDoc numbers are finite.
JoyDocSchemaValidator = extend(
    Draft7Validator,
    type_checker=Draft7Validator.TYPE_CHECKER.redefine("number", _is_finite_number),
)


def _ref(name: str) -> dict:
    return {"$ref": f"#/definitions/{name}"}


def _type_schema(spec: TypeSpec) -> dict:
    """Translate a TypeSpec into a JSON Schema fragment."""
    if spec.accepts_any():
        return {}

    alternatives = []
    for kind in spec.kinds:
        if kind == STRING:
            fragment = {"type": "string"}
            if spec.non_empty:
                fragment["minLength"] = 1
            if spec.documented:
                fragment["examples"] = list(spec.documented)
        elif kind == ARRAY:
            fragment = {"type": "array"}
            if spec.items is not None:
                fragment["items"] = _type_schema(spec.items)
        elif kind == OBJECT:
            if spec.contract:
                fragment = _ref(spec.contract)
            elif spec.entries is not None:
                fragment = {"type": "object", "additionalProperties": _type_schema(spec.entries)}
            else:
                fragment = {"type": "object"}
        elif kind in (NUMBER, BOOLEAN, NULL):
            fragment = {"type": kind}
        else:
            raise ValueError(f"Unsupported kind '{kind}'")
        alternatives.append(fragment)

    alternatives.extend({"const": lit} for lit in spec.literals)
    if len(alternatives) == 1:
        return alternatives[0]
    return {"anyOf": alternatives}


def _contract_schema(contract: EntityContract) -> dict:
    schema = {
        "type": "object",
        "properties": {a.name: _type_schema(a.spec) for a in contract.attributes},
    }
    if contract.required:
        schema["required"] = contract.required
    return schema


def _union_schema(union: DiscriminatedUnion) -> dict:
    """Base rules plus one if/then branch per registered ``type``."""
    branches = []
    for tag, variant in union.variants().items():
        branches.append({
            "if": {"properties": {"type": {"const": tag}}, "required": ["type"]},
            "then": _contract_schema(variant),
        })
    return {"allOf": [_contract_schema(union.base)] + branches}


def export_json_schema(version: str | None = None) -> dict:
    """Build the JoyDoc JSON Schema.

    Args:
        version: Value stored under ``$joyfillSchemaVersion``; defaults to
            the package version.

    Returns:
        A draft-07 JSON Schema as a plain dict.
    """
    definitions = {name: _contract_schema(c) for name, c in CONTRACTS.items()}
    definitions["Field"] = _union_schema(FIELD_UNION)
    definitions["TableColumn"] = _union_schema(COLUMN_UNION)
    definitions["Schema"] = {
        "type": "object",
        "additionalProperties": _ref("SchemaDefinition"),
    }

    files = definitions["Document"]["properties"]["files"]
    files["minItems"] = FILES_ARITY
    files["maxItems"] = FILES_ARITY

    schema = {
        "$schema": DRAFT_07,
        "$joyfillSchemaVersion": version or __version__,
        "title": "JoyDoc",
        "allOf": [_ref("Document")],
        "definitions": dict(sorted(definitions.items())),
    }
    logger.debug("Exported JSON Schema with %d definitions", len(definitions))
    return schema


def _format_path(parts) -> str:
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def _missing_name(error) -> str:
    """Name of the property a ``required`` error is about"""
    instance = error.instance if isinstance(error.instance, dict) else {}
    for name in error.validator_value:
        if name not in instance and repr(name) in error.message:
            return name
    return ""


def _to_violation(error) -> Violation:
    path = _format_path(error.absolute_path)

    if error.validator == "required":
        name = _missing_name(error)
        return Violation(
            path=_format_path(list(error.absolute_path) + [name]) if name else path or "root",
            message=error.message,
            kind=MISSING_REQUIRED,
            code="REQ-001",
        )
    if not path and error.validator == "type":
        return Violation(
            path="root",
            message=error.message,
            kind=STRUCTURAL,
            code="STR-001",
            expected="object",
        )
    if path == "files" and error.validator in ("minItems", "maxItems"):
        return Violation(
            path=path,
            message=error.message,
            kind=ARITY,
            code="ARY-001",
            expected=FILES_ARITY,
            actual=len(error.instance),
        )
    return Violation(
        path=path or "root",
        message=error.message,
        kind=TYPE_MISMATCH,
        code="TYP-001",
        expected=error.validator_value if error.validator == "type" else None,
    )


def validate_with_json_schema(doc: Any, schema: dict | None = None) -> ValidationResult:
    """Validate a document with jsonschema against the exported schema.

    jsonschema descends recursively, so a document nested deeper than the
    interpreter allows (long collection item chains) cannot be checked this
    way. That case is reported as a single STR-002 at ``root``; use
    JoyDocValidator, which walks item trees iteratively, for such documents.
    """
    if schema is None:
        schema = export_json_schema()

    validator = JoyDocSchemaValidator(schema)
    try:
        violations = [_to_violation(e) for e in validator.iter_errors(doc)]
    except RecursionError:
        logger.warning("Document nesting exceeds the recursion limit of jsonschema")
        violations = [Violation(
            path="root",
            message="Document is nested too deeply for JSON Schema validation",
            kind=STRUCTURAL,
            code="STR-002",
        )]
    logger.debug("JSON Schema validation: %d violation(s)", len(violations))
    return ValidationResult.from_violations(violations)
