"""
ACL — Attribute-Based Access Control
======================================
Role × resource × action grants with attribute scopes and
runtime conditions, evaluated in-process.

Grants add permissions. Denial is a value.
"""

from acl.attributes import (
    ALL_ATTRIBUTES,
    NO_ATTRIBUTES,
    WILDCARD,
    AllAttributes,
    AttributeScope,
    SpecificAttributes,
    attribute_scope,
)
from acl.conditions import Condition, ConditionEvaluator
from acl.control import AccessControl
from acl.decision import Decision
from acl.engine import AccessEvaluator
from acl.exceptions import (
    AccessControlError,
    MalformedGrant,
    MalformedQuery,
    PolicyBootstrapError,
    RegistryLockedError,
    UnsupportedConditionFunction,
)
from acl.grants import Grant, GrantBuilder
from acl.query import PermissionQuery
from acl.registry import PolicyRegistry

__all__ = [
    # ── Facade ────────────────────────────────────────────────
    "AccessControl",
    # ── Rules ─────────────────────────────────────────────────
    "Grant",
    "GrantBuilder",
    "Condition",
    "ConditionEvaluator",
    "PolicyRegistry",
    # ── Evaluation ────────────────────────────────────────────
    "AccessEvaluator",
    "PermissionQuery",
    "Decision",
    # ── Attribute scopes ──────────────────────────────────────
    "AttributeScope",
    "AllAttributes",
    "SpecificAttributes",
    "ALL_ATTRIBUTES",
    "NO_ATTRIBUTES",
    "WILDCARD",
    "attribute_scope",
    # ── Exceptions ────────────────────────────────────────────
    "AccessControlError",
    "UnsupportedConditionFunction",
    "MalformedQuery",
    "MalformedGrant",
    "RegistryLockedError",
    "PolicyBootstrapError",
]
