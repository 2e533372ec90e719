"""Schema compilation and the named-schemas table.

``compile_schema`` is the single entrypoint for turning a raw schema mapping
into a ``CompiledSchema``. Whether ``type`` is a nested reference or an
ordinary rule depends on the named-schemas table, so compilation takes the set
of names that resolve.
"""

import logging
from collections.abc import Mapping
from typing import Any, Container, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from mycoassert.errors import SchemaError
from mycoassert.schemas.compiled import CompiledSchema, Nesting, PropertyRuleSet

logger = logging.getLogger(__name__)

OPTIONAL_MARKER = "?"
RESERVED_KEYS = ("transform", "type", "properties")


def split_key(key: str) -> tuple[str, bool]:
    """Split a schema key into ``(property_name, is_optional)``.

    Examples
    --------
    >>> split_key("nickname?")
    ('nickname', True)
    >>> split_key("id")
    ('id', False)
    """
    if key.endswith(OPTIONAL_MARKER):
        return key[: -len(OPTIONAL_MARKER)], True
    return key, False


def compile_rule_set(key: Any, rule_set: Any, named: Container[str] = ()) -> PropertyRuleSet:
    """Compile one ``schema_key -> rule set`` entry.

    Parameters
    ----------
    key : str
        Schema key, optionally suffixed with ``?``.
    rule_set : Mapping
        Raw property rule set.
    named : container of str
        Names that resolve in the named-schemas table.

    Raises
    ------
    SchemaError
        If the key is not a string, the rule set is not a mapping, or a
        reserved key holds a value of the wrong shape.
    """
    if not isinstance(key, str):
        raise SchemaError(f"Schema keys must be strings, got {key!r}")
    if not isinstance(rule_set, Mapping):
        raise SchemaError(
            f"Rule set for '{key}' must be a mapping, got {type(rule_set).__name__}"
        )

    name, optional = split_key(key)
    reference = rule_set.get("type")
    inline_raw = rule_set.get("properties")
    rules = {
        rule_name: argument
        for rule_name, argument in rule_set.items()
        if rule_name not in ("transform", "properties")
    }

    inline = None
    if isinstance(reference, str) and reference in named:
        nesting = Nesting.REFERENCE
        rules = {}
    elif inline_raw is not None:
        nesting = Nesting.INLINE
        reference = None
        inline = compile_schema(inline_raw, named)
    else:
        nesting = Nesting.NONE
        reference = None

    try:
        return PropertyRuleSet(
            key=key,
            name=name,
            optional=optional,
            transform=rule_set.get("transform") or (),
            nesting=nesting,
            reference=reference,
            inline=inline,
            rules=rules,
        )
    except PydanticValidationError as exc:
        raise SchemaError(f"Invalid rule set for '{key}': {exc}") from exc


def compile_schema(
    schema: Union[Mapping, CompiledSchema],
    named: Container[str] = (),
) -> CompiledSchema:
    """Compile a raw schema mapping.

    Already-compiled schemas are returned unchanged.

    Examples
    --------
    >>> compiled = compile_schema({"zip": {"type": "string", "minLength": 5}})
    >>> compiled.properties[0].rules
    {'type': 'string', 'minLength': 5}
    """
    if isinstance(schema, CompiledSchema):
        return schema
    if not isinstance(schema, Mapping):
        raise SchemaError(f"Schema must be a mapping, got {type(schema).__name__}")

    return CompiledSchema(
        properties=tuple(
            compile_rule_set(key, rule_set, named) for key, rule_set in schema.items()
        )
    )


class SchemaTable:
    """Named-schemas table with lazy, cached compilation.

    Entries compile on first lookup, so self-referencing and mutually
    recursive schemas compile in finite time: a reference only records the
    target name.

    Parameters
    ----------
    schemas : Mapping, optional
        Raw schema name -> schema mapping.
    """

    def __init__(self, schemas: Optional[Mapping] = None):
        if schemas is not None and not isinstance(schemas, Mapping):
            raise SchemaError(
                f"Named schemas must be a mapping, got {type(schemas).__name__}"
            )
        self._raw = dict(schemas or {})
        self._compiled: dict[str, CompiledSchema] = {}

    @classmethod
    def coerce(cls, schemas: Union[None, Mapping, "SchemaTable"]) -> "SchemaTable":
        if isinstance(schemas, SchemaTable):
            return schemas
        return cls(schemas)

    def get(self, name: str) -> Optional[CompiledSchema]:
        if name not in self:
            return None
        if name not in self._compiled:
            logger.debug("Compiling named schema: %s", name)
            self._compiled[name] = compile_schema(self._raw[name], self)
        return self._compiled[name]

    def names(self) -> list[str]:
        return list(self._raw)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._raw

    def __len__(self) -> int:
        return len(self._raw)
