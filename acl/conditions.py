"""
ACL Engine — Condition Evaluator
==================================
Declarative predicates attached to grants, evaluated against the
caller-supplied request context.

A condition is {function, args}; args maps a context key to a path
expression. For every pair the evaluator compares the value under the
context key with the value the path expression resolves to:

    Condition("EQUALS", {"requester": "$.owner"})
    → context["requester"] == context["owner"]

Path expressions:
    "$"          → the context itself
    "$.a.b"      → context["a"]["b"] (mappings or object attributes)
    anything else → a literal value

Functions are dispatched through a name → comparison table. Unknown
names raise UnsupportedConditionFunction; missing context is a
non-match, never an error.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from acl.exceptions import MalformedGrant, UnsupportedConditionFunction

ROOT = "$"

Comparison = Callable[[Any, Any], bool]


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()


# ══════════════════════════════════════════════════════════════
# CONDITION
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Condition:
    """
    Immutable condition attached to a grant.

    Fields:
        function: Comparison name (e.g. 'EQUALS'). Not validated here;
                  unknown names surface at evaluation time.
        args:     context key → path expression.
    """

    function: str
    args: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.function or not isinstance(self.function, str):
            raise MalformedGrant("condition function must be a non-empty string.")

        if not isinstance(self.args, Mapping):
            raise MalformedGrant("condition args must be a mapping.")

        for key in self.args:
            if not isinstance(key, str) or not key:
                raise MalformedGrant("condition args keys must be non-empty strings.")

        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Condition":
        """Build from the authoring form {'Fn': ..., 'args': {...}}."""
        if "Fn" not in raw:
            raise MalformedGrant("condition mapping requires an 'Fn' entry.")
        return cls(function=raw["Fn"], args=raw.get("args") or {})

    def to_payload(self) -> dict:
        return {"Fn": self.function, "args": dict(self.args)}


def as_condition(value: Any) -> Optional[Condition]:
    """Accept a Condition, an authoring mapping, or None."""
    if value is None or isinstance(value, Condition):
        return value
    if isinstance(value, Mapping):
        return Condition.from_mapping(value)
    raise MalformedGrant(
        f"condition must be a Condition or mapping, got {type(value).__name__}."
    )


# ══════════════════════════════════════════════════════════════
# PATH RESOLUTION
# ══════════════════════════════════════════════════════════════

def resolve_path(expression: Any, context: Mapping[str, Any]) -> Any:
    """
    Resolve a path expression against the context.

    Returns MISSING when any segment cannot be dereferenced.
    """
    if not isinstance(expression, str) or not expression.startswith(ROOT):
        return expression

    if expression == ROOT:
        return context

    if not expression.startswith(ROOT + "."):
        return expression

    current: Any = context
    for part in expression[len(ROOT) + 1:].split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return MISSING
            current = current[part]
        elif hasattr(current, part) and not part.startswith("_"):
            current = getattr(current, part)
        else:
            return MISSING
    return current


# ══════════════════════════════════════════════════════════════
# COMPARISONS
# ══════════════════════════════════════════════════════════════

def _ordered(compare: Comparison) -> Comparison:
    def _compare(actual: Any, expected: Any) -> bool:
        try:
            return bool(compare(actual, expected))
        except TypeError:
            return False
    return _compare


def _is_in(actual: Any, expected: Any) -> bool:
    if isinstance(expected, (str, bytes)) or not hasattr(expected, "__contains__"):
        return False
    return actual in expected


def _not_in(actual: Any, expected: Any) -> bool:
    if isinstance(expected, (str, bytes)) or not hasattr(expected, "__contains__"):
        return False
    return actual not in expected


DEFAULT_FUNCTIONS: Mapping[str, Comparison] = MappingProxyType({
    "EQUALS": operator.eq,
    "NOT_EQUALS": operator.ne,
    "IN": _is_in,
    "NOT_IN": _not_in,
    "GREATER_THAN": _ordered(operator.gt),
    "GREATER_THAN_OR_EQUAL": _ordered(operator.ge),
    "LESS_THAN": _ordered(operator.lt),
    "LESS_THAN_OR_EQUAL": _ordered(operator.le),
})


# ══════════════════════════════════════════════════════════════
# EVALUATOR
# ══════════════════════════════════════════════════════════════

class ConditionEvaluator:
    """
    Evaluates conditions by dispatching on the function name.

    Each evaluator owns its function table; register_function()
    extends it without changing Grant or Registry shapes.
    """

    def __init__(self, functions: Optional[Mapping[str, Comparison]] = None):
        self._functions: Dict[str, Comparison] = dict(
            DEFAULT_FUNCTIONS if functions is None else functions
        )

    def register_function(self, name: str, comparison: Comparison) -> None:
        if not name or not isinstance(name, str):
            raise ValueError("function name must be a non-empty string.")
        if not callable(comparison):
            raise TypeError("comparison must be callable.")
        self._functions[name] = comparison

    def supports(self, name: str) -> bool:
        return name in self._functions

    @property
    def function_names(self) -> tuple:
        return tuple(sorted(self._functions))

    def evaluate(
        self,
        condition: Optional[Condition],
        context: Optional[Mapping[str, Any]],
    ) -> bool:
        if condition is None:
            return True

        comparison = self._functions.get(condition.function)
        if comparison is None:
            raise UnsupportedConditionFunction(condition.function)

        if context is None:
            context = {}

        for key, expression in condition.args.items():
            if key not in context:
                return False

            expected = resolve_path(expression, context)
            if expected is MISSING:
                return False

            if not comparison(context[key], expected):
                return False

        return True
