"""Turn ValidationIssues into a presentation-ready error map.

Two shapes are supported:

* flat: ``{"user.email": "..."}``, one key per dot-joined path.
* nested: ``{"user": {"email": "..."}}``, mirroring the data shape.

Issues are applied in order and a later issue overwrites an earlier one that
resolves to the same key. Union issues contribute their own message at the
union path first, then every alternative's issues in branch order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from parseform.config.defaults import FLAT_KEY_SEPARATOR, ROOT_KEY
from parseform.models.issue import PathSegment, ValidationIssue

logger = logging.getLogger(__name__)


def expand_issues(issues: Iterable[ValidationIssue]) -> Iterator[ValidationIssue]:
    """Yield issues with union alternatives inlined, paths made absolute."""
    for issue in issues:
        yield issue
        if issue.is_union:
            for branch in issue.union_errors:
                yield from expand_issues(sub.prefixed(issue.path) for sub in branch)


def flat_key(path: tuple[PathSegment, ...]) -> str:
    """Dot-join a path; the root path becomes the empty string."""
    if not path:
        return ROOT_KEY
    return FLAT_KEY_SEPARATOR.join(str(segment) for segment in path)


def nest(path: tuple[PathSegment, ...], message: str) -> dict[str, Any]:
    """Build ``{p0: {p1: ... {pn: message}}}`` for a single issue."""
    if not path:
        return {ROOT_KEY: message}
    value: str | dict[str, Any] = message
    for segment in reversed(path):
        value = {str(segment): value}
    return value  # type: ignore[return-value]


def _deep_merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            merged = dict(existing)
            _deep_merge(merged, value)
            target[key] = merged
        else:
            target[key] = value


def flatten_issues(
    issues: Iterable[ValidationIssue],
    *,
    flat_result: bool = False,
    deep_merge: bool = False,
) -> dict[str, Any]:
    """Reduce issues to an error map.

    Args:
        issues: Issues in the order the schema reported them.
        flat_result: Key by dot-joined path instead of nesting.
        deep_merge: Nested mode only. When false, an issue replaces the
            whole subtree stored under its first path segment, so two
            issues below the same parent keep only the later one. When
            true, subtrees are merged path by path and only identical
            leaf paths overwrite each other.

    Returns:
        A new error map. Never shares structure with previous calls.
    """
    errors: dict[str, Any] = {}

    for issue in expand_issues(issues):
        if flat_result:
            errors[flat_key(issue.path)] = issue.message
        elif deep_merge:
            _deep_merge(errors, nest(issue.path, issue.message))
        else:
            errors.update(nest(issue.path, issue.message))

    logger.debug(
        f"Flattened issues into {len(errors)} top-level key(s) "
        f"({'flat' if flat_result else 'nested'} mode)"
    )
    return errors
