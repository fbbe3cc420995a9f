"""Tests for pydantic error rendering helpers."""

import pytest
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from parseform.config.validator import clean_message, flatten_pydantic_errors


class SampleModel(BaseModel):
    """Simple test model for validation testing."""

    name: str = Field(min_length=1)
    temperature: float = Field(ge=0.0, le=2.0)


class SlugModel(BaseModel):
    """Model with a custom validator raising ValueError."""

    slug: str

    @field_validator("slug")
    @classmethod
    def no_spaces(cls, value: str) -> str:
        if " " in value:
            raise ValueError("must not contain spaces")
        return value


def _error_for(model: type[BaseModel], **data: object) -> PydanticValidationError:
    with pytest.raises(PydanticValidationError) as exc_info:
        model(**data)
    return exc_info.value


@pytest.mark.unit
class TestCleanMessage:
    """Tests for clean_message()."""

    def test_strips_value_error_prefix(self) -> None:
        """Test that the prefix added for ValueError is removed."""
        assert clean_message("Value error, too short") == "too short"

    def test_strips_assertion_prefix(self) -> None:
        """Test that the prefix added for assert statements is removed."""
        assert clean_message("Assertion failed, nope") == "nope"

    def test_leaves_other_messages_alone(self) -> None:
        """Test that built-in messages are returned unchanged."""
        assert clean_message("Field required") == "Field required"


@pytest.mark.unit
class TestFlattenPydanticErrors:
    """Tests for flatten_pydantic_errors() function."""

    def test_flatten_pydantic_errors_includes_field_path(self) -> None:
        """Test flattening a simple error names the field."""
        result = flatten_pydantic_errors(_error_for(SampleModel, name="", temperature=0.5))
        assert len(result) == 1
        assert result[0].startswith("Field 'name':")

    def test_flatten_pydantic_errors_with_multiple_errors(self) -> None:
        """Test flattening multiple Pydantic validation errors."""
        result = flatten_pydantic_errors(
            _error_for(SampleModel, name="", temperature=-1.0)
        )
        assert len(result) == 2
        assert all(isinstance(item, str) for item in result)

    def test_flatten_pydantic_errors_shows_received_value(self) -> None:
        """Test that the rejected input is echoed back."""
        result = flatten_pydantic_errors(
            _error_for(SampleModel, name="ok", temperature=3.5)
        )
        assert "temperature" in result[0]
        assert "(received: 3.5)" in result[0]

    def test_flatten_pydantic_errors_missing_has_no_received(self) -> None:
        """Test that missing fields do not echo the whole input."""
        result = flatten_pydantic_errors(_error_for(SampleModel, name="ok"))
        assert result == ["Field 'temperature': Field required"]

    def test_flatten_pydantic_errors_cleans_custom_messages(self) -> None:
        """Test that custom validator messages lose pydantic's prefix."""
        result = flatten_pydantic_errors(_error_for(SlugModel, slug="a b"))
        assert result[0].startswith("Field 'slug': must not contain spaces")
