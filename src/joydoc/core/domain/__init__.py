"""Domain-specific validation mixins for the JoyDoc validator."""

from joydoc.core.domain.contract import ContractValidationMixin
from joydoc.core.domain.fields import FieldValidationMixin
from joydoc.core.domain.schema_graph import SchemaGraphValidationMixin
from joydoc.core.domain.collection import CollectionValidationMixin
from joydoc.core.domain.logic import LogicValidationMixin
from joydoc.core.domain.references import ReferenceValidationMixin

__all__ = [
    "ContractValidationMixin",
    "FieldValidationMixin",
    "SchemaGraphValidationMixin",
    "CollectionValidationMixin",
    "LogicValidationMixin",
    "ReferenceValidationMixin",
]
