"""Tests for schema compilation into tagged property rule sets."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from mycoassert.errors import SchemaError
from mycoassert.schemas import (
    CompiledSchema,
    Nesting,
    SchemaTable,
    compile_rule_set,
    compile_schema,
    split_key,
)

pytestmark = pytest.mark.unit


class TestSplitKey:
    """Test optional marker handling."""

    def test_required_key(self):
        assert split_key("id") == ("id", False)

    def test_optional_key(self):
        assert split_key("nick?") == ("nick", True)

    def test_only_trailing_marker_is_stripped(self):
        assert split_key("what?now") == ("what?now", False)


class TestCompileRuleSet:
    """Test discrimination of reserved keys."""

    def test_plain_rules(self):
        prop = compile_rule_set("name", {"transform": ["trim"], "type": "string", "minLength": 1})

        assert prop.name == "name"
        assert prop.optional is False
        assert prop.transform == ("trim",)
        assert prop.nesting == Nesting.NONE
        assert prop.reference is None
        assert prop.rules == {"type": "string", "minLength": 1}

    def test_rule_order_preserved(self):
        prop = compile_rule_set("n", {"max": 5, "type": "number", "min": 1})
        assert list(prop.rules) == ["max", "type", "min"]

    def test_reference_drops_rules(self):
        prop = compile_rule_set("home?", {"type": "Addr", "minLength": 3}, named={"Addr"})

        assert prop.name == "home"
        assert prop.optional is True
        assert prop.nesting == Nesting.REFERENCE
        assert prop.reference == "Addr"
        assert prop.rules == {}

    def test_unresolved_type_stays_a_rule(self):
        prop = compile_rule_set("home", {"type": "Addr"}, named={"Other"})

        assert prop.nesting == Nesting.NONE
        assert prop.rules == {"type": "Addr"}

    def test_inline_keeps_sibling_rules(self):
        prop = compile_rule_set("cfg", {"properties": {"x": {"type": "number"}}, "isFunction": True})

        assert prop.nesting == Nesting.INLINE
        assert prop.inline.names() == ["x"]
        assert prop.rules == {"isFunction": True}

    def test_unknown_rule_names_compile(self):
        """Unknown rules fail at assertion time, not compile time."""
        prop = compile_rule_set("a", {"bogus": 1})
        assert prop.rules == {"bogus": 1}

    def test_non_string_key(self):
        with pytest.raises(SchemaError, match="keys must be strings"):
            compile_rule_set(1, {})

    def test_non_mapping_properties(self):
        with pytest.raises(SchemaError):
            compile_rule_set("cfg", {"properties": ["x"]})

    def test_compiled_rule_set_is_frozen(self):
        prop = compile_rule_set("a", {"type": "number"})
        with pytest.raises(PydanticValidationError):
            prop.name = "b"


class TestCompileSchema:
    """Test whole-schema compilation."""

    def test_order_preserved(self):
        compiled = compile_schema({"b": {}, "a?": {}, "c": {}})
        assert compiled.names() == ["b", "a", "c"]

    def test_precompiled_passthrough(self):
        compiled = compile_schema({"a": {}})
        assert compile_schema(compiled) is compiled

    def test_empty(self):
        assert compile_schema({}) == CompiledSchema()


class TestSchemaTable:
    """Test lazy compilation of named schemas."""

    def test_lookup_and_cache(self):
        table = SchemaTable({"Addr": {"zip": {"type": "string"}}})

        first = table.get("Addr")

        assert first.names() == ["zip"]
        assert table.get("Addr") is first

    def test_missing_name(self):
        table = SchemaTable({})
        assert table.get("Addr") is None
        assert "Addr" not in table

    def test_non_string_names_never_resolve(self):
        table = SchemaTable({"Addr": {}})
        assert ["Addr"] not in table

    def test_self_reference_compiles(self):
        table = SchemaTable({"Node": {"next?": {"type": "Node"}}})

        node = table.get("Node")

        assert node.properties[0].nesting == Nesting.REFERENCE
        assert node.properties[0].reference == "Node"

    def test_coerce(self):
        table = SchemaTable({"A": {}})
        assert SchemaTable.coerce(table) is table
        assert len(SchemaTable.coerce(None)) == 0
        assert SchemaTable.coerce({"A": {}}).names() == ["A"]

    def test_non_mapping_table(self):
        with pytest.raises(SchemaError):
            SchemaTable(["Addr"])
