"""Validation context: switches for advisory warnings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationContext:
    """Options that shape warnings. Errors are never configurable."""
    check_references: bool = True          # REF-xxx dangling weak references
    warn_unknown_types: bool = True        # UNK-xxx unrecognized discriminants
    warn_undocumented_values: bool = False  # ENM-001 open-enum values off the documented list
    warn_schema_root: bool = True          # SCH-001 root node count

    @classmethod
    def quiet(cls) -> "ValidationContext":
        return cls(
            check_references=False,
            warn_unknown_types=False,
            warn_undocumented_values=False,
            warn_schema_root=False,
        )


DEFAULT_VALIDATION_CONTEXT = ValidationContext()
