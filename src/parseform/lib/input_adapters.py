"""Input normalization for parseform.

Turns the supported input containers into the plain ``dict`` handed to the
schema. Adapters are tried in registry order; the first whose ``accepts``
matches wins. Repeated keys in multi-valued containers resolve to the last
entry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl

from starlette.datastructures import ImmutableMultiDict

from parseform.lib.errors import InvalidInputKindError

logger = logging.getLogger(__name__)


def _last_entry_wins(pairs: Iterable[tuple[Any, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        result[key] = value
    return result


def _is_multi_dict(data: Any) -> bool:
    return isinstance(data, ImmutableMultiDict) or callable(
        getattr(data, "multi_items", None)
    )


def _from_multi_dict(data: Any) -> dict[str, Any]:
    return _last_entry_wins(data.multi_items())


def _from_mapping(data: Mapping[str, Any]) -> dict[str, Any]:
    return dict(data)


def _from_query_string(data: str | bytes) -> dict[str, Any]:
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    return _last_entry_wins(parse_qsl(data.lstrip("?"), keep_blank_values=True))


def _is_pairs(data: Any) -> bool:
    return isinstance(data, Iterable) and not isinstance(data, (str, bytes, Mapping))


def _from_pairs(data: Iterable[tuple[Any, Any]]) -> dict[str, Any]:
    # materialized once so generators can be checked and then read
    items = list(data)
    if not all(isinstance(item, (list, tuple)) and len(item) == 2 for item in items):
        raise InvalidInputKindError(type(data).__name__)
    return _last_entry_wins((key, value) for key, value in items)


@dataclass(frozen=True)
class InputAdapter:
    """A named pair of predicate and converter for one input kind."""

    name: str
    accepts: Callable[[Any], bool]
    convert: Callable[[Any], dict[str, Any]]


# Multi-dicts are Mappings too, so they must be matched first.
INPUT_ADAPTERS: list[InputAdapter] = [
    InputAdapter("multi_dict", _is_multi_dict, _from_multi_dict),
    InputAdapter("mapping", lambda d: isinstance(d, Mapping), _from_mapping),
    InputAdapter(
        "query_string", lambda d: isinstance(d, (str, bytes)), _from_query_string
    ),
    InputAdapter("pairs", _is_pairs, _from_pairs),
]


def to_plain_mapping(data: Any) -> dict[str, Any]:
    """Normalize any supported input container into a fresh ``dict``.

    Args:
        data: A mapping, a starlette ``FormData``/``QueryParams`` (or any
            object with ``multi_items()``), a query string, or a list of
            ``(key, value)`` pairs.

    Returns:
        A new dict; the caller's container is never modified.

    Raises:
        InvalidInputKindError: If no adapter accepts ``data``.
    """
    for adapter in INPUT_ADAPTERS:
        if adapter.accepts(data):
            logger.debug(f"Normalizing input with '{adapter.name}' adapter")
            return adapter.convert(data)
    raise InvalidInputKindError(type(data).__name__)


def strip_empty_strings(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is exactly ``""``.

    A dropped key is missing to pydantic: optional fields fall back to their
    default while required fields report ``missing``.
    """
    stripped = {
        key for key, value in data.items() if isinstance(value, str) and value == ""
    }
    if stripped:
        logger.debug(f"Treating {len(stripped)} empty string(s) as absent")
    return {key: value for key, value in data.items() if key not in stripped}
