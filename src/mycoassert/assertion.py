"""Assertion engine: recursive validation and sanitization of records.

``assert_data`` walks a schema in declaration order, applies transforms,
descends into nested schemas and checks rules. It fails fast: the first
failing property raises a ``ValidationError`` whose ``property`` is the full
dot path from the asserted record down to the failure.

Two nesting mechanisms coexist and combine differently:
- ``type`` naming a named schema replaces every sibling rule
- ``properties`` (inline sub-schema) is checked *in addition to* sibling rules
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from mycoassert.errors import REQUIRED, TYPE, UNKNOWN, SchemaError, ValidationError
from mycoassert.rules import RuleRegistry, rules as default_rules
from mycoassert.schemas.compile import SchemaTable, compile_schema
from mycoassert.schemas.compiled import CompiledSchema, Nesting, PropertyRuleSet
from mycoassert.transforms import TransformRegistry, transforms as default_transforms

logger = logging.getLogger(__name__)


def assert_data(
    data: Any,
    schema: Union[Mapping, CompiledSchema],
    named_schemas: Union[None, Mapping, SchemaTable] = None,
    *,
    rules: Optional[RuleRegistry] = None,
    transforms: Optional[TransformRegistry] = None,
) -> dict:
    """Validate and sanitize ``data`` against ``schema``.

    The caller's record is never mutated. The returned dict holds every key
    of ``data``; schema-governed values may be replaced by their transformed
    or recursively sanitized form, other values are passed through by
    reference.

    Parameters
    ----------
    data : Mapping
        Record to validate.
    schema : Mapping or CompiledSchema
        Schema for this level of ``data``. A precompiled schema must have
        been compiled against the same named-schemas table.
    named_schemas : Mapping or SchemaTable, optional
        Schemas that ``type`` can reference by name.
    rules : RuleRegistry, optional
        Rule predicates. Defaults to the module-level registry.
    transforms : TransformRegistry, optional
        Transform functions. Defaults to the module-level registry.

    Returns
    -------
    dict
        Sanitized copy of ``data``.

    Raises
    ------
    ValidationError
        On the first property that fails, with ``rule`` set to ``required``,
        ``type``, ``unknown`` or the name of the failed rule.
    SchemaError
        If the schema or a referenced named schema is malformed.

    Examples
    --------
    >>> named = {"Addr": {"zip": {"type": "string", "minLength": 5}}}
    >>> assert_data({"home": {"zip": "12"}}, {"home": {"type": "Addr"}}, named)
    Traceback (most recent call last):
    ...
    mycoassert.errors.ValidationError: Validation failed for rule 'minLength' on 'zip'.
    """
    table = SchemaTable.coerce(named_schemas)
    compiled = compile_schema(schema, table)
    sanitized = _assert(
        data,
        compiled,
        table,
        default_rules if rules is None else rules,
        default_transforms if transforms is None else transforms,
    )
    logger.debug(
        "Assertion passed: %d schema properties, %d named schemas",
        len(compiled.properties),
        len(table),
    )
    return sanitized


def _assert(
    data: Any,
    schema: CompiledSchema,
    table: SchemaTable,
    rules: RuleRegistry,
    transforms: TransformRegistry,
) -> dict:
    if not isinstance(data, Mapping):
        raise ValidationError(
            "Assertion failed: provided data must be a non-null object.",
            rule=TYPE,
        )

    sanitized = dict(data)

    for prop in schema.properties:
        name = prop.name

        if name not in sanitized:
            if prop.optional:
                continue
            raise ValidationError(
                f"Assertion failed: required property '{name}' is missing.",
                property=name,
                rule=REQUIRED,
            )

        if prop.transform:
            sanitized[name] = transforms.apply(prop.transform, sanitized[name])

        value = sanitized[name]

        if prop.nesting == Nesting.REFERENCE:
            nested = table.get(prop.reference)
            sanitized[name] = _descend(name, value, nested, table, rules, transforms)
        elif prop.nesting == Nesting.INLINE:
            if not isinstance(value, Mapping):
                raise ValidationError(
                    f"Assertion failed: property '{name}' must be an object.",
                    property=name,
                    rule=TYPE,
                )
            sanitized[name] = _descend(name, value, prop.inline, table, rules, transforms)

        # Rules see the value before nested sanitization replaced it.
        _check_rules(prop, value, rules)

    return sanitized


def _descend(
    name: str,
    value: Any,
    schema: CompiledSchema,
    table: SchemaTable,
    rules: RuleRegistry,
    transforms: TransformRegistry,
) -> dict:
    try:
        return _assert(value, schema, table, rules, transforms)
    except ValidationError as error:
        raise error.prefixed(name) from error
    except SchemaError:
        raise
    except Exception as exc:
        raise ValidationError(
            f"Validation failed for '{name}': {exc}",
            property=name,
        ) from exc


def _check_rules(prop: PropertyRuleSet, value: Any, rules: RuleRegistry) -> None:
    for rule_name, argument in prop.rules.items():
        if not rules.has(rule_name):
            raise ValidationError(
                f"Unknown validation rule: '{rule_name}'.",
                property=prop.name,
                rule=UNKNOWN,
            )
        if not rules.invoke(rule_name, value, argument):
            raise ValidationError(
                f"Validation failed for rule '{rule_name}' on '{prop.name}'.",
                property=prop.name,
                rule=rule_name,
                value=value,
            )
