"""
ACL Engine — Decision
=======================
Result of a permission query: granted flag + resolved attribute scope.

Denial is a value, not an exception. Every caller must check
`granted` before acting on the target resource.

Field helpers mirror how the request layer consumes a decision:
    read   → filter(record)
    create → permits("role")
    update → split_update(payload, updatable_fields)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from acl.attributes import NO_ATTRIBUTES, AttributeScope


@dataclass(frozen=True)
class Decision:
    """
    Fields:
        granted:    True if at least one matching grant passed.
        attributes: Union of passing grants' scopes (wildcard dominates).
                    Always NO_ATTRIBUTES when denied.
    """

    granted: bool
    attributes: AttributeScope = NO_ATTRIBUTES

    def __post_init__(self):
        if not isinstance(self.granted, bool):
            raise ValueError("granted must be a bool.")

        if not isinstance(self.attributes, AttributeScope):
            raise ValueError("attributes must be an AttributeScope.")

        if not self.granted and self.attributes != NO_ATTRIBUTES:
            raise ValueError("a denied decision carries no attributes.")

    @classmethod
    def deny(cls) -> "Decision":
        return cls(granted=False)

    @property
    def is_wildcard(self) -> bool:
        return self.granted and self.attributes.is_wildcard

    def permits(self, field_name: str) -> bool:
        """True if granted and the field is inside the scope."""
        return self.granted and self.attributes.permits(field_name)

    def filter(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """Whitelist a record's fields for disclosure."""
        if not self.granted:
            return {}
        if self.attributes.is_wildcard:
            return dict(record)
        return {
            name: record[name]
            for name in self.attributes
            if name in record
        }

    def permitted_fields(self, candidates: Iterable[str]) -> Tuple[str, ...]:
        """Subset of candidate fields this decision allows, in candidate order."""
        return tuple(name for name in candidates if self.permits(name))

    def split_update(
        self,
        payload: Mapping[str, Any],
        updatable_fields: Iterable[str],
    ) -> Tuple[Dict[str, Any], List[str]]:
        """
        Partition an update payload.

        Returns (changes, rejected): changes holds the fields that are
        both updatable on the entity and inside the scope; rejected
        lists every other payload field, in payload order.
        """
        allowed = set(self.permitted_fields(updatable_fields))
        changes: Dict[str, Any] = {}
        rejected: List[str] = []
        for name, value in payload.items():
            if name in allowed:
                changes[name] = value
            else:
                rejected.append(name)
        return changes, rejected

    def to_payload(self) -> dict:
        return {
            "granted": self.granted,
            "attributes": self.attributes.to_payload(),
        }
