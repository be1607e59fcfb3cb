"""
Users & goals policy set — end-to-end scenarios through the facade.
"""

import pytest

from acl import ALL_ATTRIBUTES, AccessControl
from acl.policies.users import PROFILE_FIELDS, register_policies


OWN = {"requester": "u1", "owner": "u1"}
OTHER = {"requester": "u1", "owner": "u2"}


@pytest.fixture(scope="module")
def acl():
    control = AccessControl()
    register_policies(control)
    control.lock()
    return control


# ── Role: user ───────────────────────────────────────────────

class TestUserRole:
    def test_read_users_list(self, acl):
        decision = acl.can("user").execute("read").on("users")
        assert decision.granted
        assert decision.attributes.names == ("_id", "email", "firstName", "lastName", "profilePicture")
        assert not decision.permits("passwd")

    def test_read_own_account_includes_passwd(self, acl):
        decision = acl.can("user").context(OWN).execute("read").on("user")
        assert decision.permits("passwd")

    def test_read_other_account_denied(self, acl):
        assert not acl.can("user").context(OTHER).execute("read").on("user").granted

    def test_update_own_account(self, acl):
        decision = acl.can("user").context(OWN).execute("update").on("user")
        assert decision.attributes.names == ("passwd",) + tuple(PROFILE_FIELDS)
        assert not decision.permits("_id")

    def test_delete_own_account_has_no_attributes(self, acl):
        decision = acl.can("user").context(OWN).execute("delete").on("user")
        assert decision.to_payload() == {"granted": True, "attributes": []}

    def test_delete_other_account_denied(self, acl):
        decision = acl.can("user").context(OTHER).execute("delete").on("user")
        assert decision.to_payload() == {"granted": False, "attributes": []}

    @pytest.mark.parametrize("action", ["create", "read", "update", "delete"])
    def test_goal_crud_requires_ownership(self, acl, action):
        assert acl.can("user").context(OWN).execute(action).on("goal").granted
        assert not acl.can("user").context(OTHER).execute(action).on("goal").granted

    def test_read_own_goals(self, acl):
        assert acl.can("user").context(OWN).execute("read").on("goals").granted
        assert not acl.can("user").execute("read").on("goals").granted

    def test_user_cannot_promote_or_create_users(self, acl):
        assert not acl.can("user").execute("promote").on("user").granted
        assert not acl.can("user").execute("create").on("user").granted


# ── Role: admin ──────────────────────────────────────────────

class TestAdminRole:
    def test_read_users_wildcard(self, acl):
        decision = acl.can("admin").execute("read").on("users")
        assert decision.attributes is ALL_ATTRIBUTES

    def test_create_user_may_set_role(self, acl):
        assert acl.can("admin").execute("create").on("user").permits("role")

    def test_promote(self, acl):
        assert acl.can("admin").execute("promote").on("user").granted

    def test_update_any_user(self, acl):
        decision = acl.can("admin").context(OTHER).execute("update").on("user")
        assert decision.is_wildcard


def test_roles_are_literal(acl):
    assert not acl.can("Admin").execute("read").on("users").granted
    assert not acl.can("*").execute("read").on("users").granted


def test_registered_roles(acl):
    assert acl.registry.roles() == ["admin", "user"]
    assert acl.registry.is_locked
