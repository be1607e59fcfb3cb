"""
ACL Engine — Access Control Facade
====================================
One object per process, built at startup and injected where needed.

    acl = AccessControl()
    acl.grant("user").execute("read").on("users", ["_id", "email"])
    acl.lock()

    acl.can("user").execute("read").on("users")
    → Decision(granted=True, attributes=SpecificAttributes(("_id", "email")))
"""

from __future__ import annotations

from typing import Optional

from acl.conditions import ConditionEvaluator
from acl.engine import AccessEvaluator
from acl.grants import GrantBuilder
from acl.query import PermissionQuery
from acl.registry import PolicyRegistry


class AccessControl:
    def __init__(
        self,
        registry: Optional[PolicyRegistry] = None,
        conditions: Optional[ConditionEvaluator] = None,
    ):
        self._registry = registry if registry is not None else PolicyRegistry()
        self._evaluator = AccessEvaluator(self._registry, conditions)

    @property
    def registry(self) -> PolicyRegistry:
        return self._registry

    @property
    def conditions(self) -> ConditionEvaluator:
        return self._evaluator.conditions

    def grant(self, role: str) -> GrantBuilder:
        return GrantBuilder(self._registry, role)

    def can(self, role: str) -> PermissionQuery:
        return PermissionQuery(evaluator=self._evaluator, role=role)

    def lock(self) -> None:
        self._registry.lock()
