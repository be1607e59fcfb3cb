"""
ACL Policies — Users & Goals
==============================
Grants for the `user` and `admin` roles over user accounts and goals.

Context keys used by the request layer:
    requester → id of the acting user
    owner     → id of the user owning the target entity
"""

from __future__ import annotations

from acl.attributes import WILDCARD
from acl.conditions import Condition
from acl.control import AccessControl

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)

IS_OWNER = Condition("EQUALS", {"requester": "$.owner"})

PROFILE_FIELDS = ["email", "firstName", "lastName", "profilePicture"]


def register_user_policies(acl: AccessControl) -> None:
    # ALLOW: User:Read:User (own account)
    (
        acl.grant(ROLE_USER)
            .condition(IS_OWNER)
            .execute("read")
            .on("user", ["_id", "passwd"] + PROFILE_FIELDS)
    )

    # ALLOW: User:Read:Users
    (
        acl.grant(ROLE_USER)
            .execute("read")
            .on("users", ["_id"] + PROFILE_FIELDS)
    )

    # ALLOW: User:Update:User (own account)
    (
        acl.grant(ROLE_USER)
            .condition(IS_OWNER)
            .execute("update")
            .on("user", ["passwd"] + PROFILE_FIELDS)
    )

    # ALLOW: User:Delete:User (own account)
    (
        acl.grant(ROLE_USER)
            .condition(IS_OWNER)
            .execute("delete")
            .on("user")
    )


def register_goal_policies(acl: AccessControl) -> None:
    # ALLOW: User:CRUD:Goal (own goals)
    (
        acl.grant(ROLE_USER)
            .condition(IS_OWNER)
            .execute("create").on("goal")
            .execute("read").on("goal")
            .execute("update").on("goal")
            .execute("delete").on("goal")
    )

    # ALLOW: User:Read:Goals (own goals)
    (
        acl.grant(ROLE_USER)
            .condition(IS_OWNER)
            .execute("read")
            .on("goals")
    )


def register_admin_policies(acl: AccessControl) -> None:
    # ALLOW: Admin:*:User, Admin:Promote:User
    (
        acl.grant(ROLE_ADMIN)
            .execute("create").on("user", WILDCARD)
            .execute("read").on("user", WILDCARD)
            .execute("update").on("user", WILDCARD)
            .execute("delete").on("user")
            .execute("promote").on("user")
            .execute("read").on("users", WILDCARD)
    )

    # ALLOW: Admin:CRUD:Goal
    (
        acl.grant(ROLE_ADMIN)
            .execute("create").on("goal", WILDCARD)
            .execute("read").on("goal", WILDCARD)
            .execute("update").on("goal", WILDCARD)
            .execute("delete").on("goal")
            .execute("read").on("goals", WILDCARD)
    )


def register_policies(acl: AccessControl) -> None:
    register_user_policies(acl)
    register_goal_policies(acl)
    register_admin_policies(acl)
