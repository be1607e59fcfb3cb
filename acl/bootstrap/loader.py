"""
ACL Bootstrap — Policy Loader
===============================
Builds the process AccessControl from configured policy modules.

Order:
1. Import each module
2. Call its register_policies(acl)
3. Lock the registry (unless disabled)

A module that cannot be imported, or has no register_policies,
raises PolicyBootstrapError. No partial startup.
"""

from __future__ import annotations

import importlib
import logging
from typing import Iterable, Optional

from acl.conditions import ConditionEvaluator
from acl.control import AccessControl
from acl.exceptions import PolicyBootstrapError

logger = logging.getLogger("acl.bootstrap")

ENTRY_POINT = "register_policies"


def load_policy_module(acl: AccessControl, module_path: str) -> None:
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise PolicyBootstrapError(module_path, f"import failed: {exc}") from exc

    register = getattr(module, ENTRY_POINT, None)
    if not callable(register):
        raise PolicyBootstrapError(
            module_path, f"module does not define {ENTRY_POINT}(acl)."
        )

    before = acl.registry.grant_count()
    register(acl)
    logger.info(
        f"Policy module loaded: {module_path} "
        f"(+{acl.registry.grant_count() - before} grants)"
    )


def build_access_control(
    module_paths: Iterable[str],
    lock: bool = True,
    conditions: Optional[ConditionEvaluator] = None,
) -> AccessControl:
    logger.info("═══ ACL Bootstrap Starting ═══")

    acl = AccessControl(conditions=conditions)
    for module_path in module_paths:
        load_policy_module(acl, module_path)

    if lock:
        acl.lock()

    logger.info(
        f"═══ ACL Bootstrap DONE — {acl.registry.grant_count()} grants, "
        f"roles={acl.registry.roles()} ═══"
    )
    return acl
