"""Pytest configuration and shared fixtures for parseform tests."""

from typing import Any, Literal

import pytest
from pydantic import BaseModel, EmailStr, Field


class Credentials(BaseModel):
    """Login-style form with strict (non-coercing) fields."""

    age: int = Field(gt=0, le=150, strict=True)
    email: EmailStr
    password: str = Field(min_length=8)
    remember_me: bool = Field(strict=True)


class CoercingCredentials(BaseModel):
    """Same form as it arrives from HTML: numbers and booleans as strings."""

    age: int = Field(gt=0, le=150)
    email: EmailStr
    password: str = Field(min_length=8)
    remember_me: bool


class Signup(BaseModel):
    """Form nesting the credentials under ``user``."""

    user: Credentials


class EnabledSection(BaseModel):
    enabled: Literal[True]
    title: str = Field(min_length=1)


class DisabledSection(BaseModel):
    enabled: Literal[False]
    title: str | None = None


@pytest.fixture
def credentials_schema() -> type[Credentials]:
    """Flat login form schema."""
    return Credentials


@pytest.fixture
def coercing_schema() -> type[CoercingCredentials]:
    """Login form schema that coerces string input."""
    return CoercingCredentials


@pytest.fixture
def signup_schema() -> type[Signup]:
    """Schema with a nested object."""
    return Signup


@pytest.fixture
def section_schema() -> Any:
    """Union of two section shapes, told apart by ``enabled``."""
    return EnabledSection | DisabledSection


@pytest.fixture
def valid_credentials() -> dict[str, Any]:
    """Data accepted by every credentials schema."""
    return {
        "age": 99,
        "email": "bob@example.com",
        "password": "bobobobobbobo",
        "remember_me": True,
    }


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
