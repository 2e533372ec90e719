"""Rule registry: named predicates checked against property values.

Each rule takes the value under test and the argument written in the schema
and returns ``True`` when the value passes. Rules are pure and never raise for
well-typed arguments; a value of the wrong kind simply fails the rule.

The module-level ``rules`` registry is what the assertion engine consults by
default. Extend it at import time with ``rules.register(name, predicate)``.
"""

import math
import re
from numbers import Integral, Real
from typing import Any, Callable, Dict, Iterable, Optional

Predicate = Callable[[Any, Any], bool]


def kind_of(value: Any) -> str:
    """Return the primitive kind name of ``value``.

    Kinds are ``"boolean"``, ``"number"``, ``"string"``, ``"undefined"``
    (for ``None``), ``"function"`` and ``"object"``.

    Examples
    --------
    >>> kind_of(True), kind_of(2.5), kind_of("x"), kind_of(None), kind_of({})
    ('boolean', 'number', 'string', 'undefined', 'object')
    """
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "undefined"
    if callable(value):
        return "function"
    return "object"


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _has_length(value: Any) -> bool:
    return isinstance(value, (str, list, tuple))


def check_type(value: Any, expected: Any) -> bool:
    return kind_of(value) == expected


def check_min_length(value: Any, minimum: Any) -> bool:
    return _has_length(value) and len(value) >= minimum


def check_max_length(value: Any, maximum: Any) -> bool:
    return _has_length(value) and len(value) <= maximum


def check_is_integer(value: Any, _argument: Any = None) -> bool:
    if not _is_number(value):
        return False
    if isinstance(value, Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()


def check_min(value: Any, minimum: Any) -> bool:
    return _is_number(value) and value >= minimum


def check_max(value: Any, maximum: Any) -> bool:
    return _is_number(value) and value <= maximum


def check_pattern(value: Any, pattern: Any) -> bool:
    """Search ``value`` for ``pattern`` (unanchored, like a regex test)."""
    return isinstance(value, str) and re.search(pattern, value) is not None


def check_enum(value: Any, allowed: Iterable[Any]) -> bool:
    # bools only match bools, so True is not a member of [1]
    for candidate in allowed:
        if isinstance(candidate, bool) != isinstance(value, bool):
            continue
        if candidate == value:
            return True
    return False


def check_is_function(value: Any, _argument: Any = None) -> bool:
    return callable(value)


BUILTIN_RULES: Dict[str, Predicate] = {
    "type": check_type,
    "minLength": check_min_length,
    "maxLength": check_max_length,
    "isInteger": check_is_integer,
    "min": check_min,
    "max": check_max,
    "pattern": check_pattern,
    "enum": check_enum,
    "isFunction": check_is_function,
}


class RuleRegistry:
    """Name-keyed table of rule predicates.

    Looking up a name that was never registered is a hard failure for the
    assertion engine (rule ``unknown``), so ``has`` must be checked before
    ``invoke``.

    Parameters
    ----------
    predicates : dict, optional
        Initial name -> predicate mapping. Copied, never aliased.
    """

    def __init__(self, predicates: Optional[Dict[str, Predicate]] = None):
        self._predicates: Dict[str, Predicate] = dict(predicates or {})

    def register(self, name: str, predicate: Predicate) -> None:
        """Add or replace the predicate registered under ``name``."""
        if not callable(predicate):
            raise TypeError(f"Rule '{name}' must be callable, got {type(predicate).__name__}")
        self._predicates[name] = predicate

    def has(self, name: str) -> bool:
        return name in self._predicates

    def invoke(self, name: str, value: Any, argument: Any) -> bool:
        return bool(self._predicates[name](value, argument))

    def names(self) -> list:
        return list(self._predicates)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates

    def copy(self) -> "RuleRegistry":
        return RuleRegistry(self._predicates)


rules = RuleRegistry(BUILTIN_RULES)
