"""
ACL Engine — Exceptions
=========================
Structured errors for access-control operations.

These are authoring/integration errors, NOT access denials.
Denials flow through Decision(granted=False).
"""

from __future__ import annotations

from typing import Tuple


class AccessControlError(Exception):
    """Base error for access-control operations."""
    pass


class UnsupportedConditionFunction(AccessControlError):
    """A grant condition names a function the evaluator does not know."""

    def __init__(self, function: str):
        self.function = function
        super().__init__(
            f"Condition function '{function}' is not supported."
        )


class MalformedQuery(AccessControlError):
    """A permission query was evaluated with unbound parts."""

    def __init__(self, missing: Tuple[str, ...]):
        self.missing = tuple(missing)
        super().__init__(
            "Permission query is missing: " + ", ".join(self.missing) + "."
        )


class MalformedGrant(AccessControlError):
    """A grant chain cannot produce a valid grant."""
    pass


class RegistryLockedError(AccessControlError):
    """Policy registry is locked — no modifications allowed."""

    def __init__(self):
        super().__init__(
            "Policy Registry is locked after bootstrap. "
            "No late grant registration allowed."
        )


class PolicyBootstrapError(AccessControlError):
    """A configured policy module could not be registered at startup."""

    def __init__(self, module_path: str, detail: str):
        self.module_path = module_path
        self.detail = detail
        super().__init__(
            f"ACL BOOTSTRAP FAILURE — {module_path}: {detail}"
        )
