"""Field and table column validation mixin for the JoyDoc validator."""

from joydoc.core.errors import Violation, mismatch, warning
from joydoc.core.resolver import COLUMN_UNION, FIELD_UNION, DiscriminatedUnion
from joydoc.core.domain.contract import join


class FieldValidationMixin:
    """Mixin resolving fields and columns to their variant contract."""

    def _validate_field(self, field, path: str) -> list[Violation]:
        return self._validate_variant(field, FIELD_UNION, "UNK-001", "field", path)

    def _validate_column(self, column, path: str) -> list[Violation]:
        return self._validate_variant(column, COLUMN_UNION, "UNK-002", "column", path)

    def _validate_variant(
        self, value, union: DiscriminatedUnion, code: str, label: str, path: str
    ) -> list[Violation]:
        if not isinstance(value, dict):
            return [mismatch(path, f"{union.base.name} object", value)]

        tag = value.get("type")
        contract = union.resolve(tag)
        findings = self._validate_contract(value, contract, path)

        # Unknown string tags fall back to the custom contract; say so
        if isinstance(tag, str) and not union.is_known(tag) and self.context.warn_unknown_types:
            findings.append(warning(
                join(path, "type"),
                f"Unknown {label} type '{tag}', only base attributes were checked",
                code,
                actual=tag,
                valid_options=union.known_tags(),
            ))
        return findings
