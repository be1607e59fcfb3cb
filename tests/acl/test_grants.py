"""
Tests for acl.grants — Grant model and fluent GrantBuilder.
"""

import pytest

from acl import (
    ALL_ATTRIBUTES,
    NO_ATTRIBUTES,
    AccessControl,
    Condition,
    Grant,
    MalformedGrant,
    SpecificAttributes,
)


IS_OWNER = {"Fn": "EQUALS", "args": {"requester": "$.owner"}}


@pytest.fixture
def acl():
    return AccessControl()


# ── Grant ────────────────────────────────────────────────────

class TestGrant:
    def test_defaults(self):
        grant = Grant(role="user", action="delete", resource="user")
        assert grant.attributes == NO_ATTRIBUTES
        assert grant.condition is None
        assert not grant.is_conditional

    def test_frozen(self):
        grant = Grant(role="user", action="read", resource="users")
        with pytest.raises(AttributeError):
            grant.role = "admin"

    @pytest.mark.parametrize("field_name", ["role", "action", "resource"])
    def test_identifiers_required(self, field_name):
        kwargs = {"role": "user", "action": "read", "resource": "users"}
        kwargs[field_name] = ""
        with pytest.raises(MalformedGrant, match=field_name):
            Grant(**kwargs)

    def test_payload(self):
        grant = Grant(
            role="user",
            action="read",
            resource="user",
            attributes=SpecificAttributes(("_id",)),
            condition=Condition("EQUALS", {"requester": "$.owner"}),
        )
        assert grant.to_payload() == {
            "role": "user",
            "action": "read",
            "resource": "user",
            "attributes": ["_id"],
            "condition": IS_OWNER,
        }


# ── Builder ──────────────────────────────────────────────────

class TestGrantBuilder:
    def test_nothing_registered_until_on(self, acl):
        acl.grant("user").condition(IS_OWNER).execute("read")
        assert acl.registry.grant_count() == 0

    def test_on_registers_one_grant(self, acl):
        acl.grant("user").execute("read").on("users", ["_id", "email"])

        (grant,) = acl.registry.grants_for("user", "users")
        assert grant.action == "read"
        assert grant.attributes == SpecificAttributes(("_id", "email"))
        assert grant.condition is None

    def test_chained_actions_share_role_and_condition(self, acl):
        acl.grant("user").condition(IS_OWNER) \
            .execute("create").on("goal") \
            .execute("read").on("goal") \
            .execute("update").on("goal") \
            .execute("delete").on("goal")

        grants = acl.registry.grants_for("user", "goal")
        assert [g.action for g in grants] == ["create", "read", "update", "delete"]
        assert all(g.condition == Condition.from_mapping(IS_OWNER) for g in grants)

    def test_condition_override_and_clear(self, acl):
        builder = acl.grant("user").condition(IS_OWNER).execute("read").on("goal")
        builder.condition(None).execute("read").on("goals")

        assert acl.registry.grants_for("user", "goal")[0].is_conditional
        assert not acl.registry.grants_for("user", "goals")[0].is_conditional

    def test_action_carries_over(self, acl):
        acl.grant("admin").execute("read").on("user", "*").on("goal", "*")

        assert acl.registry.grants_for("admin", "goal")[0].action == "read"

    def test_on_without_execute(self, acl):
        with pytest.raises(MalformedGrant, match="execute"):
            acl.grant("user").on("users")

    def test_wildcard_attributes(self, acl):
        acl.grant("admin").execute("read").on("users", "*")
        assert acl.registry.grants_for("admin", "users")[0].attributes is ALL_ATTRIBUTES

    def test_bad_attributes(self, acl):
        with pytest.raises(MalformedGrant):
            acl.grant("user").execute("read").on("users", "email")

    def test_empty_role(self, acl):
        with pytest.raises(MalformedGrant):
            acl.grant("")

    def test_unknown_function_not_validated_at_registration(self, acl):
        acl.grant("user").condition({"Fn": "BOGUS", "args": {}}).execute("read").on("x")
        assert acl.registry.grant_count() == 1
