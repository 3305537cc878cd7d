"""Collection item tree validation mixin for the JoyDoc validator."""

from joydoc.core.errors import Violation, mismatch
from joydoc.core.model import COLLECTION_ITEM, EntityContract
from joydoc.core.domain.contract import join


# Children are walked by the stack, not by the contract checker
_ITEM_FIELDS = EntityContract(
    COLLECTION_ITEM.name,
    tuple(a for a in COLLECTION_ITEM.attributes if a.name != "children"),
)


class CollectionValidationMixin:
    """Mixin walking collection item trees.

    Items nest through ``children.<schemaId>.value`` to arbitrary depth, so
    the walk uses an explicit stack instead of recursion.
    """

    def _validate_collection_item(self, item, path: str) -> list[Violation]:
        findings = []
        stack = [(item, path)]

        while stack:
            current, current_path = stack.pop()
            if not isinstance(current, dict):
                findings.append(mismatch(current_path, "CollectionItem object", current))
                continue

            findings.extend(self._validate_contract(current, _ITEM_FIELDS, current_path))

            if "children" not in current:
                continue
            children_path = join(current_path, "children")
            children = current["children"]
            if not isinstance(children, dict):
                findings.append(mismatch(children_path, "map of CollectionChildren", children))
                continue

            pending = []
            for schema_id, entry in children.items():
                entry_path = join(children_path, schema_id)
                if not isinstance(entry, dict):
                    findings.append(mismatch(entry_path, "CollectionChildren object", entry))
                    continue
                if "value" not in entry:
                    continue
                value = entry["value"]
                value_path = join(entry_path, "value")
                if not isinstance(value, list):
                    findings.append(mismatch(value_path, "array of CollectionItem", value))
                    continue
                pending.extend((child, f"{value_path}[{i}]") for i, child in enumerate(value))

            # Reversed so items pop in document order
            stack.extend(reversed(pending))

        return findings
