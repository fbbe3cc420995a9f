"""Validate form input and normalize the outcome.

``normalize_form_result`` is the single entry point of parseform. It adapts
the input container, optionally strips empty strings, validates with
pydantic and returns either the typed value or a per-field error map.
"""

from __future__ import annotations

import logging
from typing import Any

from parseform.config.options import ParseOptions
from parseform.lib.flatten import flatten_issues
from parseform.lib.input_adapters import strip_empty_strings as _strip_empty
from parseform.lib.input_adapters import to_plain_mapping
from parseform.lib.pydantic_issues import safe_parse
from parseform.models.result import Failure, ParseOutcome, Success

logger = logging.getLogger(__name__)


def normalize_form_result(
    schema: Any,
    data: Any,
    *,
    strip_empty_strings: bool | None = None,
    flat_result: bool | None = None,
    deep_merge: bool | None = None,
    options: ParseOptions | None = None,
) -> ParseOutcome[Any]:
    """Validate ``data`` against ``schema`` and normalize the result.

    Args:
        schema: A pydantic model, dataclass, TypedDict, annotated type or a
            ready ``TypeAdapter``.
        data: A mapping, starlette ``FormData``/``QueryParams``, a query
            string, or a list of ``(key, value)`` pairs. Repeated keys keep
            their last value.
        strip_empty_strings: Treat ``""`` values as missing.
        flat_result: Key errors by dot-joined path (``"user.email"``)
            instead of nesting them (``{"user": {"email": ...}}``).
        deep_merge: In nested mode, keep sibling errors that share a parent.
        options: Base options; explicit keyword arguments override it.

    Returns:
        ``Success(valid_data)`` or ``Failure(errors, validation_error)``.

    Raises:
        InvalidInputKindError: If ``data`` is not a supported container.
        ConfigError: If the options are invalid.
        pydantic.errors.PydanticSchemaGenerationError: If ``schema`` is not
            something pydantic can validate with.

    Example:
        >>> class Login(BaseModel):
        ...     email: EmailStr
        ...     password: str = Field(min_length=8)
        >>> normalize_form_result(Login, {"email": "bob"}).errors
        {'email': 'value is not a valid email address: ...', 'password': 'Field required'}
    """
    opts = ParseOptions.from_kwargs(
        options,
        strip_empty_strings=strip_empty_strings,
        flat_result=flat_result,
        deep_merge=deep_merge,
    )

    prepared = to_plain_mapping(data)
    if opts.strip_empty_strings:
        prepared = _strip_empty(prepared)

    parsed = safe_parse(schema, prepared)
    if parsed.success:
        return Success(valid_data=parsed.data)

    errors = flatten_issues(
        parsed.issues, flat_result=opts.flat_result, deep_merge=opts.deep_merge
    )
    logger.debug(f"Returning {len(errors)} error key(s)")
    return Failure(errors=errors, validation_error=parsed.error)


parse_form = normalize_form_result
