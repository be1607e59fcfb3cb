"""
ACL Bootstrap — Public API
============================
"""

from acl.bootstrap.loader import build_access_control, load_policy_module


def get_access_control():
    """Process AccessControl built by AclConfig.ready()."""
    from django.apps import apps

    return apps.get_app_config("acl").access_control


__all__ = [
    "build_access_control",
    "load_policy_module",
    "get_access_control",
]
