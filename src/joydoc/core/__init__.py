"""Core validation components."""

from joydoc.core.errors import ValidationResult, Violation
from joydoc.core.context import ValidationContext, DEFAULT_VALIDATION_CONTEXT
from joydoc.core.resolver import resolve_column_variant, resolve_field_variant
from joydoc.core.validator import (
    JoyDocValidator,
    validate_document,
    validate_logic,
    validate_schema,
)

__all__ = [
    "JoyDocValidator",
    "ValidationResult",
    "Violation",
    "ValidationContext",
    "DEFAULT_VALIDATION_CONTEXT",
    "resolve_field_variant",
    "resolve_column_variant",
    "validate_document",
    "validate_schema",
    "validate_logic",
]
