"""
ACL Engine — Attribute Scopes
===============================
Which fields of a resource a grant (or a decision) exposes.

AllAttributes      → every field (wildcard, dominant in unions)
SpecificAttributes → an ordered, duplicate-free tuple of field names

The empty SpecificAttributes means "authorization only": the grant
says nothing about field-level disclosure (e.g. delete).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

WILDCARD = "*"


class AttributeScope:
    """Base of the attribute-scope tagged union."""

    is_wildcard: bool = False

    def permits(self, name: str) -> bool:
        raise NotImplementedError

    def union(self, other: "AttributeScope") -> "AttributeScope":
        raise NotImplementedError

    def to_payload(self):
        raise NotImplementedError


@dataclass(frozen=True)
class AllAttributes(AttributeScope):
    """Wildcard scope: all fields of the resource."""

    is_wildcard = True

    def permits(self, name: str) -> bool:
        return True

    def union(self, other: AttributeScope) -> AttributeScope:
        return self

    def to_payload(self) -> str:
        return WILDCARD

    def __repr__(self) -> str:
        return "ALL_ATTRIBUTES"


@dataclass(frozen=True)
class SpecificAttributes(AttributeScope):
    """Enumerated scope, first-seen order preserved."""

    names: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.names, tuple):
            raise ValueError("names must be a tuple.")

        for name in self.names:
            if not isinstance(name, str) or not name:
                raise ValueError("attribute names must be non-empty strings.")
            if name == WILDCARD:
                raise ValueError(
                    f"'{WILDCARD}' is not a field name; use ALL_ATTRIBUTES."
                )

        object.__setattr__(self, "names", tuple(dict.fromkeys(self.names)))

    def permits(self, name: str) -> bool:
        return name in self.names

    def union(self, other: AttributeScope) -> AttributeScope:
        if other.is_wildcard:
            return other
        return SpecificAttributes(self.names + other.names)

    def to_payload(self) -> list:
        return list(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


ALL_ATTRIBUTES = AllAttributes()
NO_ATTRIBUTES = SpecificAttributes(())


def attribute_scope(
    value: Union[None, str, Iterable[str], AttributeScope],
) -> AttributeScope:
    """
    Normalise an authoring-time attribute argument.

    None → NO_ATTRIBUTES, "*" or ["*"] → ALL_ATTRIBUTES,
    any other iterable of names → SpecificAttributes.
    """
    if value is None:
        return NO_ATTRIBUTES

    if isinstance(value, AttributeScope):
        return value

    if isinstance(value, str):
        if value == WILDCARD:
            return ALL_ATTRIBUTES
        raise ValueError(
            f"attributes must be '{WILDCARD}' or a list of field names, "
            f"got string '{value}'."
        )

    names = tuple(value)
    if WILDCARD in names:
        if len(names) > 1:
            raise ValueError(
                f"'{WILDCARD}' cannot be mixed with enumerated field names."
            )
        return ALL_ATTRIBUTES
    return SpecificAttributes(names)


def merge_scopes(scopes: Iterable[AttributeScope]) -> AttributeScope:
    """Union scopes left to right; the wildcard dominates."""
    merged: AttributeScope = NO_ATTRIBUTES
    for scope in scopes:
        merged = merged.union(scope)
        if merged.is_wildcard:
            break
    return merged
