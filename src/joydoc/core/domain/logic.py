"""Conditional logic validation mixin for the JoyDoc validator."""

from joydoc.core.errors import Violation, mismatch, missing
from joydoc.core.model import (
    CONDITION,
    LOGIC,
    SCHEMA_LOGIC,
    SCHEMA_LOGIC_CONDITION,
    EntityContract,
)
from joydoc.core.domain.contract import join


# condition_contract -> (logic contract, condition contract)
LOGIC_CONTRACTS: dict[str, tuple[EntityContract, EntityContract]] = {
    "field": (LOGIC, CONDITION),
    "schema": (SCHEMA_LOGIC, SCHEMA_LOGIC_CONDITION),
}


class LogicValidationMixin:
    """Mixin providing show/hide logic validation.

    The same validator serves field/page logic (conditions point at a
    file/page/field triple) and collection schema logic (conditions point at
    a schema node and column).
    """

    def _validate_logic(self, logic, condition_contract: str = "field", path: str = "logic") -> list[Violation]:
        if condition_contract not in LOGIC_CONTRACTS:
            raise ValueError(
                f"Unknown condition contract '{condition_contract}', "
                f"expected one of {sorted(LOGIC_CONTRACTS)}"
            )
        logic_contract, cond_contract = LOGIC_CONTRACTS[condition_contract]

        if not isinstance(logic, dict):
            return [mismatch(path, f"{logic_contract.name} object", logic)]

        findings = []
        for name in ("action", "eval"):
            if name not in logic:
                findings.append(missing(join(path, name), name, logic_contract.name))
            else:
                attr = logic_contract.attribute(name)
                findings.extend(self._check_value(logic[name], attr.spec, join(path, name)))

        if "_id" in logic:
            attr = logic_contract.attribute("_id")
            findings.extend(self._check_value(logic["_id"], attr.spec, join(path, "_id")))

        conditions_path = join(path, "conditions")
        if "conditions" not in logic:
            findings.append(missing(conditions_path, "conditions", logic_contract.name))
            return findings

        conditions = logic["conditions"]
        if not isinstance(conditions, list):
            findings.append(mismatch(conditions_path, f"array of {cond_contract.name}", conditions))
            return findings

        # An empty conditions array is allowed
        for i, condition in enumerate(conditions):
            findings.extend(self._validate_contract(condition, cond_contract, f"{conditions_path}[{i}]"))
        return findings
