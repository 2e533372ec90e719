"""Pydantic models for compiled schemas and checker configuration.

Exports
-------
compile_schema : function
    Single entrypoint for schema compilation
SchemaTable : class
    Named-schemas table with lazy compilation
CompiledSchema : class
    Ordered compiled property rule sets
PropertyRuleSet : class
    One compiled schema entry (transforms, nesting, rules)
Nesting : enum
    Nesting mode of a property
CheckConfig : class
    Command-line checker options
"""

from mycoassert.schemas.compiled import CompiledSchema, Nesting, PropertyRuleSet
from mycoassert.schemas.compile import SchemaTable, compile_rule_set, compile_schema, split_key
from mycoassert.schemas.config import CheckConfig

__all__ = [
    'compile_schema',
    'compile_rule_set',
    'split_key',
    'SchemaTable',
    'CompiledSchema',
    'PropertyRuleSet',
    'Nesting',
    'CheckConfig',
]
