"""Centralized error model for assertion failures.

Every failure of the assertion engine and the contract verifier raises the
same exception type, discriminated by ``rule``. Callers can handle bad data
uniformly and still tell a missing property from a failed predicate.

Key distinction:
- ValidationError: the *data* does not satisfy the schema
- SchemaError: the *schema document* itself is malformed
"""

from typing import Any, Optional

REQUIRED = "required"
TYPE = "type"
UNKNOWN = "unknown"


class ValidationError(ValueError):
    """Raised when data fails a schema assertion.

    Parameters
    ----------
    property : str or None
        Dot-joined path from the asserted record to the failing property,
        root first. ``None`` when the asserted record itself is not a mapping.
    rule : str or None
        Name of the failed rule, or one of the structural failures
        ``required``, ``type`` and ``unknown``.
    message : str
        Human-readable description of the failure.
    value : Any, optional
        Offending value. Only set for rule failures.
    """

    def __init__(
        self,
        message: str,
        property: Optional[str] = None,
        rule: Optional[str] = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.property = property
        self.rule = rule
        self.value = value

    def prefixed(self, name: str) -> "ValidationError":
        """Return a copy of this error located under the property ``name``."""
        path = name if self.property is None else f"{name}.{self.property}"
        return ValidationError(self.message, property=path, rule=self.rule, value=self.value)

    def to_dict(self) -> dict:
        return {
            "property": self.property,
            "rule": self.rule,
            "message": self.message,
            "value": self.value,
        }

    def __repr__(self) -> str:
        return (
            f"ValidationError(property={self.property!r}, rule={self.rule!r}, "
            f"message={self.message!r})"
        )


class SchemaError(ValueError):
    """Raised when a schema document cannot be compiled.

    This indicates a bug in the schema, not bad input data.
    """
    pass
