"""Parse outcome types.

A parse either succeeds with the typed value produced by the schema or fails
with an error map. The two variants are separate classes so an outcome can
never carry both (or neither)::

    outcome = parse_form(SignupForm, data)
    match outcome:
        case Success(valid_data=form):
            save(form)
        case Failure(errors=errors):
            render(errors)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeAlias, TypeVar

from pydantic import ValidationError as PydanticValidationError

T = TypeVar("T")

ErrorMap: TypeAlias = "dict[str, str | ErrorMap]"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Validation passed.

    Attributes:
        valid_data: The value returned by the schema, coercions applied.
    """

    valid_data: T
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    """Validation failed.

    Attributes:
        errors: Field key to message (or nested error map in nested mode).
        validation_error: The original pydantic error, for callers that need
            every detail. Excluded from equality so two failures with the
            same error map compare equal.
    """

    errors: ErrorMap
    validation_error: PydanticValidationError | None = field(
        default=None, compare=False, repr=False
    )
    ok: Literal[False] = field(default=False, init=False)


ParseOutcome: TypeAlias = "Success[T] | Failure"
