"""Tests for config models."""

import pytest
from pydantic import ValidationError

from aml_models.config.models import CLIConfig, check_format


class TestCheckFormat:
    @pytest.mark.parametrize("value", ["table", "json", "yaml"])
    def test_valid(self, value):
        assert check_format(value) == value

    def test_case_insensitive(self):
        assert check_format("JSON") == "json"

    def test_invalid(self):
        with pytest.raises(ValueError, match="Output format must be one of"):
            check_format("csv")


class TestCLIConfig:
    def test_defaults(self):
        c = CLIConfig()
        assert c.default_format == "table"
        assert c.warn_unknown_enums is True
        assert c.json_indent == 2

    def test_format_normalized(self):
        assert CLIConfig(default_format="YAML").default_format == "yaml"

    def test_invalid_format(self):
        with pytest.raises(ValidationError, match="Output format must be one of"):
            CLIConfig(default_format="xml")

    def test_indent_bounds(self):
        with pytest.raises(ValidationError):
            CLIConfig(json_indent=0)
        with pytest.raises(ValidationError):
            CLIConfig(json_indent=9)

    def test_text_values_coerced(self):
        c = CLIConfig.model_validate({"warn_unknown_enums": "false", "json_indent": "4"})
        assert c.warn_unknown_enums is False
        assert c.json_indent == 4
