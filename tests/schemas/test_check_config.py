"""Tests for CheckConfig validation."""

import pytest
from pydantic import ValidationError

from mycoassert.schemas import CheckConfig

pytestmark = pytest.mark.unit


def test_defaults():
    """Only the two paths are required."""
    config = CheckConfig(data_path="d.json", schema_path="s.json")
    assert config.mode == "assert"
    assert config.named_schemas_path is None
    assert config.log_level == "WARNING"
    assert config.indent == 2


def test_log_level_normalized():
    config = CheckConfig(data_path="d", schema_path="s", log_level=" debug ")
    assert config.log_level == "DEBUG"


def test_mode_normalized():
    config = CheckConfig(data_path="d", schema_path="s", mode="CONTRACT")
    assert config.mode == "contract"


def test_invalid_mode_rejected():
    with pytest.raises(ValidationError):
        CheckConfig(data_path="d", schema_path="s", mode="sanitize")


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        CheckConfig(data_path="d", schema_path="s", log_level="LOUD")


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        CheckConfig(data_path="d", schema_path="s", verbose=True)


def test_negative_indent_rejected():
    with pytest.raises(ValidationError):
        CheckConfig(data_path="d", schema_path="s", indent=-1)
