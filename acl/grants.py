"""
ACL Engine — Grants
=====================
Grant: immutable rule {role, action, resource, attributes, condition}.
GrantBuilder: fluent registration chain.

    acl.grant("user")
        .condition({"Fn": "EQUALS", "args": {"requester": "$.owner"}})
        .execute("create").on("goal")
        .execute("read").on("goal")

Each .on() registers exactly one Grant. The pending condition and
action carry over to later .on() calls until overridden.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

from acl.attributes import NO_ATTRIBUTES, AttributeScope, attribute_scope
from acl.conditions import Condition, as_condition
from acl.exceptions import MalformedGrant

if TYPE_CHECKING:
    from acl.registry import PolicyRegistry


def _require_identifier(value: Any, name: str) -> str:
    if not value or not isinstance(value, str):
        raise MalformedGrant(f"{name} must be a non-empty string.")
    return value


@dataclass(frozen=True)
class Grant:
    """
    A registered rule.

    Fields:
        role:       Requester class, matched literally.
        action:     Operation name (create, read, update, delete, ...).
        resource:   Resource name; 'user' and 'users' are distinct.
        attributes: Field scope exposed by this grant.
        condition:  Optional runtime predicate; None means unconditional.
    """

    role: str
    action: str
    resource: str
    attributes: AttributeScope = NO_ATTRIBUTES
    condition: Optional[Condition] = None

    def __post_init__(self):
        _require_identifier(self.role, "role")
        _require_identifier(self.action, "action")
        _require_identifier(self.resource, "resource")

        if not isinstance(self.attributes, AttributeScope):
            raise MalformedGrant("attributes must be an AttributeScope.")

        if self.condition is not None and not isinstance(self.condition, Condition):
            raise MalformedGrant("condition must be a Condition or None.")

    @property
    def is_conditional(self) -> bool:
        return self.condition is not None

    def to_payload(self) -> dict:
        return {
            "role": self.role,
            "action": self.action,
            "resource": self.resource,
            "attributes": self.attributes.to_payload(),
            "condition": (
                self.condition.to_payload() if self.condition else None
            ),
        }


class GrantBuilder:
    """
    Registration-time builder bound to one role.

    Mutable and confined to the single-threaded bootstrap phase;
    never share a builder between threads.
    """

    def __init__(self, registry: "PolicyRegistry", role: str):
        self._registry = registry
        self._role = _require_identifier(role, "role")
        self._condition: Optional[Condition] = None
        self._action: Optional[str] = None

    @property
    def role(self) -> str:
        return self._role

    def condition(self, condition: Union[Condition, dict, None]) -> "GrantBuilder":
        self._condition = as_condition(condition)
        return self

    def execute(self, action: str) -> "GrantBuilder":
        self._action = _require_identifier(action, "action")
        return self

    def on(
        self,
        resource: str,
        attributes: Union[None, str, Iterable[str], AttributeScope] = None,
    ) -> "GrantBuilder":
        if self._action is None:
            raise MalformedGrant(
                f"grant('{self._role}').on('{resource}') requires "
                f"a preceding .execute(action)."
            )

        try:
            scope = attribute_scope(attributes)
        except ValueError as exc:
            raise MalformedGrant(str(exc)) from exc

        self._registry.register(
            Grant(
                role=self._role,
                action=self._action,
                resource=resource,
                attributes=scope,
                condition=self._condition,
            )
        )
        return self
