"""
Tests for acl.decision — Decision value object and field helpers.
"""

import pytest

from acl import ALL_ATTRIBUTES, NO_ATTRIBUTES, Decision, SpecificAttributes


USER = {
    "_id": "u1",
    "passwd": "hash",
    "email": "a@b.c",
    "firstName": "Ada",
    "role": "user",
}

UPDATABLE = ("passwd", "email", "firstName", "lastName", "profilePicture")


def _granted(*names):
    return Decision(granted=True, attributes=SpecificAttributes(tuple(names)))


WILDCARD = Decision(granted=True, attributes=ALL_ATTRIBUTES)
DENIED = Decision.deny()


class TestDecision:
    def test_deny(self):
        assert DENIED.granted is False
        assert DENIED.attributes == NO_ATTRIBUTES
        assert not DENIED.is_wildcard

    def test_denied_with_attributes_rejected(self):
        with pytest.raises(ValueError, match="no attributes"):
            Decision(granted=False, attributes=ALL_ATTRIBUTES)

    def test_granted_must_be_bool(self):
        with pytest.raises(ValueError):
            Decision(granted=1)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            WILDCARD.granted = False

    def test_permits(self):
        assert WILDCARD.permits("role")
        assert _granted("email").permits("email")
        assert not _granted("email").permits("role")
        assert not DENIED.permits("role")


class TestFilter:
    def test_wildcard_returns_everything(self):
        assert WILDCARD.filter(USER) == USER
        assert WILDCARD.filter(USER) is not USER

    def test_listed_fields_only(self):
        assert _granted("_id", "email", "lastName").filter(USER) == {
            "_id": "u1",
            "email": "a@b.c",
        }

    def test_denied_discloses_nothing(self):
        assert DENIED.filter(USER) == {}


class TestUpdate:
    def test_permitted_fields_keep_candidate_order(self):
        decision = _granted("email", "passwd", "role")
        assert decision.permitted_fields(UPDATABLE) == ("passwd", "email")

    def test_wildcard_permits_all_updatable(self):
        assert WILDCARD.permitted_fields(UPDATABLE) == UPDATABLE

    def test_split_update(self):
        decision = _granted("passwd", "email", "firstName")
        changes, rejected = decision.split_update(
            {"email": "new@b.c", "role": "admin", "firstName": "Bo", "_id": "x"},
            UPDATABLE,
        )
        assert changes == {"email": "new@b.c", "firstName": "Bo"}
        assert rejected == ["role", "_id"]

    def test_split_update_wildcard_still_limited_to_updatable(self):
        changes, rejected = WILDCARD.split_update({"email": "e", "_id": "x"}, UPDATABLE)
        assert changes == {"email": "e"}
        assert rejected == ["_id"]

    def test_split_update_denied_rejects_all(self):
        changes, rejected = DENIED.split_update({"email": "e"}, UPDATABLE)
        assert changes == {}
        assert rejected == ["email"]
