"""Transform registry: named functions that rewrite a value before validation.

Transforms never raise. Unlike rules, a transform name that is not registered
is silently skipped, so a schema can list transforms that only some
deployments provide. Pair ``toInt`` with an ``isInteger`` or ``type`` rule:
it returns ``nan`` when nothing can be parsed.
"""

import logging
import math
import re
from numbers import Real
from typing import Any, Callable, Dict, Iterable, Optional

logger = logging.getLogger(__name__)

Transform = Callable[[Any], Any]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def trim(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def to_lower_case(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def to_int(value: Any) -> Any:
    """Parse the leading base-10 integer of ``value``.

    Examples
    --------
    >>> to_int(" 42px")
    42
    >>> to_int(-3.7)
    -3
    >>> to_int("px")
    nan
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, Real):
        if not math.isfinite(value):
            return math.nan
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return math.nan


BUILTIN_TRANSFORMS: Dict[str, Transform] = {
    "trim": trim,
    "toLowerCase": to_lower_case,
    "toInt": to_int,
}


class TransformRegistry:
    """Name-keyed table of transform functions."""

    def __init__(self, functions: Optional[Dict[str, Transform]] = None):
        self._functions: Dict[str, Transform] = dict(functions or {})

    def register(self, name: str, function: Transform) -> None:
        if not callable(function):
            raise TypeError(f"Transform '{name}' must be callable, got {type(function).__name__}")
        self._functions[name] = function

    def has(self, name: str) -> bool:
        return name in self._functions

    def invoke(self, name: str, value: Any) -> Any:
        return self._functions[name](value)

    def apply(self, names: Iterable[str], value: Any) -> Any:
        """Fold the named transforms over ``value`` left to right.

        Unregistered names are no-ops.
        """
        for name in names:
            if name not in self._functions:
                logger.debug("Skipping unregistered transform: %s", name)
                continue
            value = self._functions[name](value)
        return value

    def names(self) -> list:
        return list(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def copy(self) -> "TransformRegistry":
        return TransformRegistry(self._functions)


transforms = TransformRegistry(BUILTIN_TRANSFORMS)
