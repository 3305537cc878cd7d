"""Violation types and validation result for the JoyDoc validator."""

import math
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Literal


# Violation kinds
MISSING_REQUIRED = "MissingRequiredAttribute"
TYPE_MISMATCH = "TypeMismatch"
ARITY = "ArityViolation"
STRUCTURAL = "StructuralViolation"
ADVISORY = "Advisory"

ViolationKind = Literal[
    "MissingRequiredAttribute",
    "TypeMismatch",
    "ArityViolation",
    "StructuralViolation",
    "Advisory",
]

# Error code prefixes
# REQ-xxx: Missing required attributes
# TYP-xxx: Type mismatches
# ARY-xxx: Collection cardinality
# STR-xxx: Malformed object graph (STR-002: too deep for jsonschema)
# UNK-xxx: Unknown discriminants (warning)
# ENM-xxx: Undocumented open-enum values (warning)
# SCH-xxx: Collection schema advisories (warning)
# REF-xxx: Dangling weak references (warning)


@dataclass
class Violation:
    """A single problem located inside a document."""
    path: str  # "fields[0].schema.s1.tableColumns"
    message: str
    kind: ViolationKind = TYPE_MISMATCH
    code: str = ""
    severity: Literal["error", "warning"] = "error"

    # Machine-processable info
    expected: Any = None
    actual: Any = None
    valid_options: list[str] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "path": self.path,
            "message": self.message,
            "kind": self.kind,
            "code": self.code,
            "severity": self.severity,
            "expected": self.expected,
            "actual": self.actual,
            "valid_options": self.valid_options,
        }


def missing(path: str, name: str, context: str = "") -> Violation:
    msg = f"Missing required attribute '{name}'"
    if context:
        msg = f"{context}: {msg}"
    return Violation(
        path=path,
        message=msg,
        kind=MISSING_REQUIRED,
        code="REQ-001",
    )


def mismatch(path: str, expected: str, actual: Any) -> Violation:
    return Violation(
        path=path or "root",
        message=f"Expected {expected}, got {describe(actual)}",
        kind=TYPE_MISMATCH,
        code="TYP-001",
        expected=expected,
        actual=describe(actual),
    )


def warning(path: str, message: str, code: str, **extra: Any) -> Violation:
    return Violation(
        path=path,
        message=message,
        kind=ADVISORY,
        code=code,
        severity="warning",
        **extra,
    )


def describe(value: Any) -> str:
    """Name the JSON kind of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number" if math.isfinite(value) else "non-finite number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    violations: list[Violation]
    warnings: list[Violation] = dataclass_field(default_factory=list)

    @classmethod
    def from_violations(
        cls, violations: list[Violation], warnings: list[Violation] | None = None
    ) -> "ValidationResult":
        return cls(
            valid=len(violations) == 0,
            violations=violations,
            warnings=warnings or [],
        )

    @property
    def paths(self) -> list[str]:
        return [v.path for v in self.violations]

    def by_kind(self, kind: str) -> list[Violation]:
        return [v for v in self.violations if v.kind == kind]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "valid": self.valid,
            "violations": [v.to_dict() for v in self.violations],
            "warnings": [w.to_dict() for w in self.warnings],
        }
