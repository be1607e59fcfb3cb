"""
ACL — Settings
================
Engine settings resolved from Django settings, with defaults.

    ACL_POLICY_MODULES  dotted paths exposing register_policies(acl)
    ACL_LOCK_REGISTRY   lock the registry once bootstrap completes
"""

from __future__ import annotations

from typing import Tuple

from django.conf import settings

DEFAULT_POLICY_MODULES = ("acl.policies.users",)
DEFAULT_LOCK_REGISTRY = True


def policy_modules() -> Tuple[str, ...]:
    modules = getattr(settings, "ACL_POLICY_MODULES", DEFAULT_POLICY_MODULES)
    if isinstance(modules, str):
        raise ValueError("ACL_POLICY_MODULES must be a list of module paths.")
    return tuple(modules)


def lock_registry() -> bool:
    return bool(getattr(settings, "ACL_LOCK_REGISTRY", DEFAULT_LOCK_REGISTRY))
