"""
ACL Engine — Permission Query
===============================
Immutable query builder:

    decision = acl.can("user").context(ctx).execute("update").on("user")
    decision = await acl.can("user").execute("read").aon("users")

Every step returns a new PermissionQuery, so a partially built query
can be shared and extended from any number of callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

from acl.decision import Decision
from acl.exceptions import MalformedQuery

if TYPE_CHECKING:
    from acl.engine import AccessEvaluator


@dataclass(frozen=True)
class PermissionQuery:
    evaluator: "AccessEvaluator" = field(repr=False, compare=False)
    role: Optional[str] = None
    action: Optional[str] = None
    ctx: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def context(self, ctx: Optional[Mapping[str, Any]]) -> "PermissionQuery":
        return replace(self, ctx=MappingProxyType(dict(ctx or {})))

    def execute(self, action: str) -> "PermissionQuery":
        return replace(self, action=action)

    def on(self, resource: str) -> Decision:
        """Resolve the query for a resource."""
        missing = tuple(
            name
            for name, value in (
                ("role", self.role),
                ("action", self.action),
                ("resource", resource),
            )
            if not value or not isinstance(value, str)
        )
        if missing:
            raise MalformedQuery(missing)

        return self.evaluator.evaluate(
            role=self.role,
            resource=resource,
            action=self.action,
            context=self.ctx,
        )

    async def aon(self, resource: str) -> Decision:
        return self.on(resource)
