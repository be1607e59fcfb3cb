"""
ACL Engine — Policy Registry
==============================
Append-only store of grants, indexed by (role, resource).

Responsibilities:
- Register grants (insertion order preserved)
- Index by (role, resource) for query-time lookup
- Lock after bootstrap

Writes are serialised and publish a fresh index mapping, so lookups
never take the lock and never observe a partially appended index.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List, Tuple

from acl.exceptions import RegistryLockedError
from acl.grants import Grant

logger = logging.getLogger("acl.policy")

_EMPTY: Tuple[Grant, ...] = ()


class PolicyRegistry:
    """
    Registry of grants.

    Usage:
        registry = PolicyRegistry()
        registry.register(Grant(role="user", action="read", resource="users"))
        registry.lock()

        grants = registry.grants_for("user", "users")
    """

    def __init__(self):
        self._index: Dict[Tuple[str, str], Tuple[Grant, ...]] = {}
        self._grants: Tuple[Grant, ...] = ()
        self._locked: bool = False
        self._lock = Lock()

    # ══════════════════════════════════════════════════════════
    # REGISTRATION
    # ══════════════════════════════════════════════════════════

    def register(self, grant: Grant) -> None:
        if not isinstance(grant, Grant):
            raise TypeError(
                f"Expected Grant instance, got {type(grant).__name__}."
            )

        key = (grant.role, grant.resource)

        with self._lock:
            if self._locked:
                raise RegistryLockedError()

            index = dict(self._index)
            index[key] = index.get(key, _EMPTY) + (grant,)
            self._index = index
            self._grants = self._grants + (grant,)

        logger.info(
            f"Grant registered: {grant.role}:{grant.action}:{grant.resource} "
            f"attributes={grant.attributes!r} "
            f"conditional={grant.is_conditional}"
        )

    def lock(self) -> None:
        with self._lock:
            if self._locked:
                return
            self._locked = True
            count = len(self._grants)

        logger.info(f"Policy Registry LOCKED — {count} grants")

    @property
    def is_locked(self) -> bool:
        return self._locked

    # ══════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════

    def grants_for(self, role: str, resource: str) -> Tuple[Grant, ...]:
        """Grants for (role, resource) in registration order."""
        return self._index.get((role, resource), _EMPTY)

    def all_grants(self) -> Tuple[Grant, ...]:
        return self._grants

    def grant_count(self) -> int:
        return len(self._grants)

    def roles(self) -> List[str]:
        return sorted({role for role, _ in self._index})

    def resources_for(self, role: str) -> List[str]:
        return sorted({resource for r, resource in self._index if r == role})
