"""JoyDoc document validator"""

import logging
from typing import Any

from joydoc.core.errors import (
    ARITY,
    STRUCTURAL,
    ValidationResult,
    Violation,
    describe,
)
from joydoc.core.context import DEFAULT_VALIDATION_CONTEXT, ValidationContext
from joydoc.core.model import DOCUMENT, FILES_ARITY
from joydoc.core.domain import (
    ContractValidationMixin,
    FieldValidationMixin,
    SchemaGraphValidationMixin,
    CollectionValidationMixin,
    LogicValidationMixin,
    ReferenceValidationMixin,
)


logger = logging.getLogger(__name__)


class JoyDocValidator(
    ContractValidationMixin,
    FieldValidationMixin,
    SchemaGraphValidationMixin,
    CollectionValidationMixin,
    LogicValidationMixin,
    ReferenceValidationMixin,
):
    """Validates JoyDoc documents against the entity contracts.

    A validator holds only immutable configuration; every call builds fresh
    violation lists, so one instance can be shared.
    """

    def __init__(self, context: ValidationContext | None = None):
        self.context = context or DEFAULT_VALIDATION_CONTEXT

    def validate(self, doc: Any) -> ValidationResult:
        """Validate a whole document"""
        # 1. Document must be an object
        if not isinstance(doc, dict):
            violation = Violation(
                path="root",
                message=f"Document must be an object, got {describe(doc)}",
                kind=STRUCTURAL,
                code="STR-001",
                expected="object",
                actual=describe(doc),
            )
            return self._result([violation], "document")

        findings = []

        # 2. Root attributes, files, fields and formulas
        findings.extend(self._validate_contract(doc, DOCUMENT, ""))

        # 3. Exactly one file container
        findings.extend(self._validate_files_arity(doc))

        # 4. Dangling references (warnings only)
        if self.context.check_references:
            findings.extend(self._check_references(doc))

        return self._result(findings, "document")

    def validate_schema(self, schema: Any) -> ValidationResult:
        """Validate a collection field's schema map on its own"""
        return self._result(self._validate_schema_map(schema, ""), "schema")

    def validate_logic(self, logic: Any, condition_contract: str = "field") -> ValidationResult:
        """Validate a logic block; ``condition_contract`` is "field" or "schema"."""
        return self._result(self._validate_logic(logic, condition_contract, ""), "logic")

    def validate_field(self, field: Any) -> ValidationResult:
        return self._result(self._validate_field(field, ""), "field")

    def _validate_files_arity(self, doc: dict) -> list[Violation]:
        files = doc.get("files")
        if not isinstance(files, list) or len(files) == FILES_ARITY:
            return []
        return [Violation(
            path="files",
            message=f"Document must contain exactly {FILES_ARITY} file, found {len(files)}",
            kind=ARITY,
            code="ARY-001",
            expected=FILES_ARITY,
            actual=len(files),
        )]

    def _result(self, findings: list[Violation], subject: str) -> ValidationResult:
        errors = [f for f in findings if f.severity == "error"]
        warnings = [f for f in findings if f.severity != "error"]
        logger.debug(
            "Validated %s: %d violation(s), %d warning(s)",
            subject, len(errors), len(warnings),
        )
        return ValidationResult.from_violations(errors, warnings)


def validate_document(doc: Any, context: ValidationContext | None = None) -> ValidationResult:
    """Convenience function to validate a document"""
    return JoyDocValidator(context).validate(doc)


def validate_schema(schema: Any, context: ValidationContext | None = None) -> ValidationResult:
    return JoyDocValidator(context).validate_schema(schema)


def validate_logic(
    logic: Any, condition_contract: str = "field", context: ValidationContext | None = None
) -> ValidationResult:
    return JoyDocValidator(context).validate_logic(logic, condition_contract)
