"""JoyDoc - open-world validation for Joyfill JoyDoc documents."""

__version__ = "0.1.0"

from joydoc.core.validator import JoyDocValidator, validate_document
from joydoc.core.errors import ValidationResult, Violation
from joydoc.core.context import ValidationContext
from joydoc.config.project import ProjectConfig

__all__ = [
    "JoyDocValidator",
    "validate_document",
    "ValidationResult",
    "Violation",
    "ValidationContext",
    "ProjectConfig",
]
