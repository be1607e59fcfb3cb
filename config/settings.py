"""
ACL – Django Settings (Infrastructure Only)
============================================
Django serves as the process container for the ACL engine:
app loading triggers policy registration before requests are served.

The engine itself has no models and no database access.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("ACL_SECRET_KEY", "acl-dev-key-replace-before-deployment")

DEBUG = os.environ.get("ACL_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "acl.bootstrap",
]

# ── Database ──────────────────────────────────────────────────
# The engine is in-memory only.
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
USE_TZ = True
TIME_ZONE = "UTC"

# ── Access Control ────────────────────────────────────────────
# Each module must define register_policies(acl).
ACL_POLICY_MODULES = [
    "acl.policies.users",
]

# Registry is read-only once bootstrap completes.
ACL_LOCK_REGISTRY = True

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "acl": {
            "handlers": ["console"],
            "level": os.environ.get("ACL_LOG_LEVEL", "INFO"),
        },
    },
}
