"""
ACL Engine — Evaluation Engine
================================
Pure, deterministic resolution of (role, resource, action, context)
into a Decision.

Flow:
1. Look up grants for (role, resource)
2. Keep grants for the requested action
3. Evaluate each condition against the context
4. None pass → denied
5. Otherwise granted, attributes = union of passing scopes

Any-match OR policy: grants only add permissions, there is no deny
rule. Roles match literally, no hierarchy.

The engine does NOT:
- Mutate the registry
- Perform I/O
- Swallow condition errors (UnsupportedConditionFunction propagates)
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from acl.attributes import merge_scopes
from acl.conditions import ConditionEvaluator
from acl.decision import Decision
from acl.grants import Grant
from acl.registry import PolicyRegistry

logger = logging.getLogger("acl.policy")


class AccessEvaluator:
    """
    Core evaluation engine.

    Pure function wrapped in a class for dependency injection.

    Usage:
        evaluator = AccessEvaluator(registry=registry)
        decision = evaluator.evaluate(
            role="user",
            resource="user",
            action="update",
            context={"requester": "u1", "owner": "u1"},
        )
    """

    def __init__(
        self,
        registry: PolicyRegistry,
        conditions: Optional[ConditionEvaluator] = None,
    ):
        self._registry = registry
        self._conditions = conditions or ConditionEvaluator()

    @property
    def registry(self) -> PolicyRegistry:
        return self._registry

    @property
    def conditions(self) -> ConditionEvaluator:
        return self._conditions

    def evaluate(
        self,
        role: str,
        resource: str,
        action: str,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Decision:
        if context is None:
            context = {}

        # ── Step 1: Grants for (role, resource) ───────────────
        candidates = self._registry.grants_for(role, resource)
        if not candidates:
            logger.debug(f"No grants for {role}:{resource} — denied")
            return Decision.deny()

        # ── Step 2 + 3: Action match, then condition ──────────
        passing: List[Grant] = [
            grant
            for grant in candidates
            if grant.action == action
            and self._conditions.evaluate(grant.condition, context)
        ]

        # ── Step 4: Nothing passed ────────────────────────────
        if not passing:
            logger.debug(f"{role}:{action}:{resource} — denied")
            return Decision.deny()

        # ── Step 5: Union of attribute scopes ─────────────────
        attributes = merge_scopes(grant.attributes for grant in passing)
        logger.debug(
            f"{role}:{action}:{resource} — granted "
            f"({len(passing)} grant(s)) attributes={attributes!r}"
        )
        return Decision(granted=True, attributes=attributes)
