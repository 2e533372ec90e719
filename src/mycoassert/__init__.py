"""`mycoassert` - runtime schema assertion and contract verification.

Validates and sanitizes untyped records against declarative schemas, and
verifies that a host's context object satisfies a module's contract.

Modules:
- assertion: recursive validation/sanitization engine
- contract: context contract verification
- rules, transforms: extensible name-keyed registries
- schemas: compiled schema models and checker config
- trails: routing table for remotely loaded modules
"""

from mycoassert.assertion import assert_data
from mycoassert.contract import CONTRACT_SECTIONS, verify_contract
from mycoassert.errors import SchemaError, ValidationError
from mycoassert.rules import RuleRegistry
from mycoassert.schemas import SchemaTable, compile_schema
from mycoassert.transforms import TransformRegistry

__version__ = "0.1.0"

__all__ = [
    "assert_data",
    "verify_contract",
    "CONTRACT_SECTIONS",
    "ValidationError",
    "SchemaError",
    "RuleRegistry",
    "TransformRegistry",
    "SchemaTable",
    "compile_schema",
]
