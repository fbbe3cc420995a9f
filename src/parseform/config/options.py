"""Options controlling how a validation outcome is normalized."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool
from pydantic import ValidationError as PydanticValidationError

from parseform.config.defaults import DEFAULT_OPTIONS
from parseform.config.validator import flatten_pydantic_errors
from parseform.lib.errors import ConfigError


class ParseOptions(BaseModel):
    """Options for ``normalize_form_result``.

    Attributes:
        strip_empty_strings: Treat ``""`` values as absent before validation.
        flat_result: Key errors by dot-joined path instead of nesting them.
        deep_merge: In nested mode, merge issues sharing a root segment by
            path instead of letting the later subtree replace the earlier one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strip_empty_strings: StrictBool = DEFAULT_OPTIONS["strip_empty_strings"]
    flat_result: StrictBool = DEFAULT_OPTIONS["flat_result"]
    deep_merge: StrictBool = DEFAULT_OPTIONS["deep_merge"]

    @classmethod
    def from_kwargs(
        cls, base: ParseOptions | None = None, **overrides: Any
    ) -> ParseOptions:
        """Build options from an optional base plus keyword overrides.

        ``None`` overrides are ignored so callers can forward unset keyword
        arguments unchanged.

        Raises:
            ConfigError: If an override names an unknown option or has the
                wrong type.
        """
        values = base.model_dump() if base is not None else {}
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls.model_validate(values)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(item) for item in first.get("loc", ())) or "options"
            raise ConfigError(field, "; ".join(flatten_pydantic_errors(e))) from e
