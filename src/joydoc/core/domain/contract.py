"""Contract checking mixin for the JoyDoc validator."""

from typing import Any

from joydoc.core.errors import (
    TYPE_MISMATCH,
    Violation,
    describe,
    mismatch,
    missing,
    warning,
)
from joydoc.core.model import (
    ARRAY,
    CONTRACTS,
    EntityContract,
    OBJECT,
    STRING,
    TypeSpec,
)


def join(path: str, key: Any) -> str:
    """Append an attribute or map key to a dot/bracket path."""
    return f"{path}.{key}" if path else str(key)


def json_kind(value: Any) -> str:
    """JSON kind of a decoded value; non-finite floats match no kind."""
    return describe(value)


def expected_label(spec: TypeSpec) -> str:
    labels = []
    for kind in spec.kinds:
        if kind == OBJECT and spec.contract:
            labels.append(f"{spec.contract} object")
        elif kind == ARRAY and spec.items is not None and spec.items.contract:
            labels.append(f"array of {spec.items.contract}")
        else:
            labels.append(kind)
    labels.extend(repr(lit) for lit in spec.literals)
    return " or ".join(labels)


def _is_literal(value: Any, spec: TypeSpec) -> bool:
    return any(type(value) is type(lit) and value == lit for lit in spec.literals)


class ContractValidationMixin:
    """Mixin that checks objects against EntityContracts.

    Every check returns a list of findings (errors and warnings) for its own
    subtree; nothing is raised and nothing is shared between calls.
    """

    def _validate_contract(self, value: Any, contract: EntityContract, path: str) -> list[Violation]:
        """Check required/optional attributes of one object. Undeclared keys pass."""
        if not isinstance(value, dict):
            return [mismatch(path, f"{contract.name} object", value)]

        findings = []
        for attr in contract.attributes:
            attr_path = join(path, attr.name)
            if attr.name not in value:
                if attr.required:
                    findings.append(missing(attr_path, attr.name, contract.name))
                continue
            findings.extend(self._check_value(value[attr.name], attr.spec, attr_path))
        return findings

    def _check_value(self, value: Any, spec: TypeSpec, path: str) -> list[Violation]:
        """Check a single attribute value against its TypeSpec."""
        if spec.accepts_any() or _is_literal(value, spec):
            return []

        kind = json_kind(value)
        if kind not in spec.kinds:
            return [mismatch(path, expected_label(spec), value)]

        findings = []
        if kind == STRING:
            if spec.non_empty and value == "":
                findings.append(Violation(
                    path=path,
                    message="Identifier must be a non-empty string",
                    kind=TYPE_MISMATCH,
                    code="TYP-002",
                    expected="non-empty string",
                    actual="",
                ))
            elif spec.documented and value not in spec.documented \
                    and self.context.warn_undocumented_values:
                findings.append(warning(
                    path,
                    f"Value '{value}' is not one of the documented values",
                    "ENM-001",
                    actual=value,
                    valid_options=list(spec.documented),
                ))
        elif kind == ARRAY and spec.items is not None:
            for i, item in enumerate(value):
                findings.extend(self._check_value(item, spec.items, f"{path}[{i}]"))
        elif kind == OBJECT:
            if spec.entries is not None:
                for key, entry in value.items():
                    findings.extend(self._check_value(entry, spec.entries, join(path, key)))
            elif spec.contract:
                findings.extend(self._validate_entity(value, spec.contract, path))
        return findings

    def _validate_entity(self, value: dict, contract_name: str, path: str) -> list[Violation]:
        """Dispatch a named entity to the component that owns it."""
        if contract_name == "Field":
            return self._validate_field(value, path)
        if contract_name == "TableColumn":
            return self._validate_column(value, path)
        if contract_name == "Schema":
            return self._validate_schema_map(value, path)
        if contract_name == "Logic":
            return self._validate_logic(value, "field", path)
        if contract_name == "SchemaLogic":
            return self._validate_logic(value, "schema", path)
        if contract_name == "CollectionItem":
            return self._validate_collection_item(value, path)
        return self._validate_contract(value, CONTRACTS[contract_name], path)


__all__ = ["ContractValidationMixin", "join", "json_kind"]
