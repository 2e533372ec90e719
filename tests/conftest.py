"""Root-level pytest fixtures for the mycoassert test suite.

Provides shared schemas and named-schema tables. Tests that register extra
rules or transforms must use the registry fixtures, never the module-level
registries.
"""

import pytest

from mycoassert.rules import rules
from mycoassert.transforms import transforms


# =============================================================================
# Schema Fixtures
# =============================================================================

@pytest.fixture
def user_schema():
    """Flat schema exercising transforms, optional keys and common rules."""
    return {
        "username": {"transform": ["trim", "toLowerCase"], "type": "string", "minLength": 3},
        "age": {"transform": ["toInt"], "type": "number", "isInteger": True, "min": 0, "max": 150},
        "role": {"enum": ["admin", "editor", "viewer"]},
        "email?": {"type": "string", "pattern": r"^[^@\s]+@[^@\s]+$"},
    }


@pytest.fixture
def named_schemas():
    """Named schemas including a self-recursive one.

    Examples
    --------
    >>> def test_person(named_schemas):
    ...     assert_data(person, {"person": {"type": "Person"}}, named_schemas)
    """
    return {
        "Addr": {"zip": {"type": "string", "minLength": 5}},
        "Person": {
            "name": {"transform": ["trim"], "type": "string", "minLength": 1},
            "home?": {"type": "Addr"},
            "friend?": {"type": "Person"},
        },
    }


# =============================================================================
# Registry Fixtures
# =============================================================================

@pytest.fixture
def rule_registry():
    """Fresh rule registry with the built-ins, safe to extend."""
    return rules.copy()


@pytest.fixture
def transform_registry():
    """Fresh transform registry with the built-ins, safe to extend."""
    return transforms.copy()
