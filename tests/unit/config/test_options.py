"""Tests for parseform.config.options."""

import pytest
from pydantic import ValidationError

from parseform.config.options import ParseOptions
from parseform.lib.errors import ConfigError


@pytest.mark.unit
class TestParseOptions:
    """Tests for the ParseOptions model."""

    def test_defaults(self) -> None:
        """Test that every option is off by default."""
        options = ParseOptions()
        assert options.strip_empty_strings is False
        assert options.flat_result is False
        assert options.deep_merge is False

    def test_options_are_frozen(self) -> None:
        """Test that options cannot be mutated after creation."""
        options = ParseOptions()
        with pytest.raises(ValidationError):
            options.flat_result = True  # type: ignore[misc]

    def test_unknown_option_rejected(self) -> None:
        """Test that typos in option names are not silently ignored."""
        with pytest.raises(ValidationError):
            ParseOptions(flatResult=True)  # type: ignore[call-arg]


@pytest.mark.unit
class TestParseOptionsFromKwargs:
    """Tests for ParseOptions.from_kwargs()."""

    def test_overrides_apply_on_top_of_base(self) -> None:
        """Test that keyword overrides win over the base options."""
        base = ParseOptions(flat_result=True, strip_empty_strings=True)
        options = ParseOptions.from_kwargs(base, flat_result=False)
        assert options.flat_result is False
        assert options.strip_empty_strings is True

    def test_none_overrides_are_ignored(self) -> None:
        """Test that unset keyword arguments keep the base value."""
        base = ParseOptions(deep_merge=True)
        options = ParseOptions.from_kwargs(base, deep_merge=None, flat_result=None)
        assert options == base

    def test_without_base_uses_defaults(self) -> None:
        """Test that a missing base falls back to defaults."""
        assert ParseOptions.from_kwargs(None) == ParseOptions()

    def test_wrong_type_raises_config_error(self) -> None:
        """Test that invalid values surface as ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            ParseOptions.from_kwargs(None, flat_result="yes")
        assert exc_info.value.field == "flat_result"
        assert "received: 'yes'" in exc_info.value.message

    def test_unknown_override_raises_config_error(self) -> None:
        """Test that unknown option names surface as ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            ParseOptions.from_kwargs(None, flatResult=True)
        assert exc_info.value.field == "flatResult"
