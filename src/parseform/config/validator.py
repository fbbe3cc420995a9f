"""Readable rendering of pydantic validation errors."""

from pydantic import ValidationError as PydanticValidationError

from parseform.config.defaults import STRIPPED_MESSAGE_PREFIXES


def clean_message(message: str) -> str:
    """Remove the prefix pydantic adds to messages from custom validators.

    ``ValueError("too short")`` raised inside a validator surfaces as
    ``"Value error, too short"``; forms want the bare ``"too short"``.
    """
    for prefix in STRIPPED_MESSAGE_PREFIXES:
        if message.startswith(prefix):
            return message[len(prefix) :]
    return message


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one line per error.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of messages such as ``"Field 'user.email': Field required"``.
        Errors located at the root are reported under ``<root>``.

    Example:
        >>> from pydantic import BaseModel, ValidationError
        >>> class Options(BaseModel):
        ...     flat_result: bool
        >>> try:
        ...     Options(flat_result="maybe")
        ... except ValidationError as e:
        ...     flatten_pydantic_errors(e)
        ["Field 'flat_result': Input should be a valid boolean, ... (received: 'maybe')"]
    """
    lines: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "<root>"
        msg = clean_message(error.get("msg", "Unknown error"))

        if "input" in error and error.get("type") != "missing":
            lines.append(f"Field '{field_path}': {msg} (received: {error['input']!r})")
        else:
            lines.append(f"Field '{field_path}': {msg}")

    return lines or ["Validation failed with unknown error"]
