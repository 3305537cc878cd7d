"""Discriminated union resolution for fields and table columns.

Fields and table columns carry a ``type`` discriminant that selects the
attribute contract of their variant. Unknown discriminants are not errors:
they resolve to an open "custom" contract that only enforces the shared base
attributes, so documents written by newer producers keep validating.
"""

from typing import Any, Iterable

from joydoc.core.model import (
    Attribute,
    BASE_COLUMN,
    BASE_FIELD,
    COLUMN_VARIANT_ATTRIBUTES,
    EntityContract,
    FIELD_VARIANT_ATTRIBUTES,
)


class DiscriminatedUnion:
    """Registry mapping a discriminant value to a variant contract."""

    def __init__(self, name: str, base: EntityContract, fallback: str):
        self.name = name
        self.base = base
        self.fallback = base.extend(fallback)
        self._variants: dict[str, EntityContract] = {}

    def register(self, tag: str, attributes: Iterable[Attribute]) -> EntityContract:
        """Register (or replace) the variant selected by ``tag``."""
        contract = self.base.extend(f"{tag}{self.name}", *attributes)
        self._variants[tag] = contract
        return contract

    def resolve(self, tag: Any) -> EntityContract:
        if isinstance(tag, str) and tag in self._variants:
            return self._variants[tag]
        return self.fallback

    def is_known(self, tag: Any) -> bool:
        return isinstance(tag, str) and tag in self._variants

    def known_tags(self) -> list[str]:
        return list(self._variants.keys())

    def variants(self) -> dict[str, EntityContract]:
        return dict(self._variants)


FIELD_UNION = DiscriminatedUnion("Field", BASE_FIELD, "CustomField")
for _tag, _attrs in FIELD_VARIANT_ATTRIBUTES.items():
    FIELD_UNION.register(_tag, _attrs)

COLUMN_UNION = DiscriminatedUnion("Column", BASE_COLUMN, "CustomColumn")
for _tag, _attrs in COLUMN_VARIANT_ATTRIBUTES.items():
    COLUMN_UNION.register(_tag, _attrs)


def resolve_field_variant(discriminant: Any) -> EntityContract:
    """Return the attribute contract for a field ``type``."""
    return FIELD_UNION.resolve(discriminant)


def resolve_column_variant(discriminant: Any) -> EntityContract:
    """Return the attribute contract for a table column ``type``."""
    return COLUMN_UNION.resolve(discriminant)
