"""Collection schema graph validation mixin for the JoyDoc validator."""

from joydoc.core.errors import Violation, mismatch, warning
from joydoc.core.model import SCHEMA_DEFINITION
from joydoc.core.domain.contract import join


class SchemaGraphValidationMixin:
    """Mixin validating the schema map of a collection field.

    Nodes are checked in a single flat pass. ``children`` only has to be an
    array of strings; graph shape (cycles, reachability) is not enforced.
    """

    def _validate_schema_map(self, schema, path: str) -> list[Violation]:
        if not isinstance(schema, dict):
            return [mismatch(path, "Schema object", schema)]

        findings = []
        roots = []
        for node_id, node in schema.items():
            node_path = join(path, node_id)
            if not isinstance(node, dict):
                findings.append(mismatch(node_path, "SchemaDefinition object", node))
                continue
            if node.get("root") is True:
                roots.append(node_id)

            findings.extend(self._validate_contract(node, SCHEMA_DEFINITION, node_path))

            if self.context.check_references:
                findings.extend(self._check_schema_node_refs(schema, node, node_path))

        if self.context.warn_schema_root and schema and len(roots) != 1:
            findings.append(warning(
                path or "root",
                f"Schema should have exactly one root node, found {len(roots)}",
                "SCH-001",
                expected=1,
                actual=len(roots),
                valid_options=roots,
            ))
        return findings

    def _check_schema_node_refs(self, schema: dict, node: dict, node_path: str) -> list[Violation]:
        """Warn about children and logic conditions that name no sibling node."""
        findings = []
        children = node.get("children")
        if isinstance(children, list):
            for i, child in enumerate(children):
                if isinstance(child, str) and child not in schema:
                    findings.append(warning(
                        f"{node_path}.children[{i}]",
                        f"Child schema '{child}' is not defined in this schema",
                        "REF-005",
                        actual=child,
                        valid_options=list(schema.keys()),
                    ))

        logic = node.get("logic")
        conditions = logic.get("conditions") if isinstance(logic, dict) else None
        if not isinstance(conditions, list):
            return findings

        for i, cond in enumerate(conditions):
            if not isinstance(cond, dict):
                continue
            cond_path = f"{node_path}.logic.conditions[{i}]"
            target_id = cond.get("schema")
            if not isinstance(target_id, str):
                continue
            target = schema.get(target_id)
            if not isinstance(target, dict):
                findings.append(warning(
                    f"{cond_path}.schema",
                    f"Condition schema '{target_id}' is not defined in this schema",
                    "REF-006",
                    actual=target_id,
                    valid_options=list(schema.keys()),
                ))
                continue

            column_id = cond.get("column")
            columns = target.get("tableColumns")
            if isinstance(column_id, str) and isinstance(columns, list):
                column_ids = [c.get("_id") for c in columns if isinstance(c, dict)]
                if column_id not in column_ids:
                    findings.append(warning(
                        f"{cond_path}.column",
                        f"Condition column '{column_id}' is not a column of schema '{target_id}'",
                        "REF-006",
                        actual=column_id,
                        valid_options=[c for c in column_ids if isinstance(c, str)],
                    ))
        return findings
