"""
ACL Bootstrap — App Configuration
===================================
Registers all configured policies when Django finishes loading.

Rules:
- Runs once via ready()
- Completes before any request is served
- If a policy module fails → PolicyBootstrapError prevents startup
"""

from django.apps import AppConfig


class AclConfig(AppConfig):
    name = "acl.bootstrap"
    label = "acl"
    verbose_name = "Access Control"

    access_control = None

    def ready(self):
        from acl import conf
        from acl.bootstrap.loader import build_access_control

        self.access_control = build_access_control(
            conf.policy_modules(),
            lock=conf.lock_registry(),
        )
