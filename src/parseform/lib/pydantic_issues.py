"""Non-raising validation with pydantic, reported as ValidationIssues.

pydantic reports every failed alternative of a union as a separate error
whose ``loc`` contains the alternative's label, e.g. ``("Draft", "title")``.
To tell labels from field names, the schema's core schema is walked along
each ``loc``: a segment consumed by a ``union`` node is a branch label, a
segment consumed by a ``tagged-union`` node is a discriminator tag.

Errors under the same smart union are regrouped into a single
``invalid_union`` issue with one branch per label. Discriminated unions only
attempt one branch, so their tag is simply dropped from the path.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from parseform.config.defaults import UNION_KIND, UNION_MESSAGE
from parseform.config.validator import clean_message
from parseform.models.issue import PathSegment, ValidationIssue

logger = logging.getLogger(__name__)

T = TypeVar("T")

_WRAPPER_TYPES = frozenset(
    {
        "default",
        "nullable",
        "function-before",
        "function-after",
        "function-wrap",
        "model",
        "dataclass",
    }
)
_SEQUENCE_TYPES = frozenset({"list", "set", "frozenset", "generator"})


@dataclass
class SafeParseResult(Generic[T]):
    """Outcome of ``safe_parse``.

    Attributes:
        success: Whether the schema accepted the data.
        data: Validated value when ``success`` is true.
        issues: Issues in the order pydantic reported them otherwise.
        error: The original pydantic exception on failure.
    """

    success: bool
    data: T | None = None
    issues: list[ValidationIssue] = field(default_factory=list)
    error: PydanticValidationError | None = None


def get_adapter(schema: Any) -> TypeAdapter[Any]:
    """Return a TypeAdapter for ``schema``, reusing it if it already is one.

    Raises:
        pydantic.errors.PydanticSchemaGenerationError: If pydantic cannot
            build a validator for ``schema``.
    """
    if isinstance(schema, TypeAdapter):
        return schema
    return TypeAdapter(schema)


def safe_parse(schema: Any, data: Mapping[str, Any]) -> SafeParseResult[Any]:
    """Validate ``data`` against ``schema`` without raising on invalid data.

    Only ``pydantic.ValidationError`` is caught; problems with the schema
    itself propagate to the caller.
    """
    adapter = get_adapter(schema)
    try:
        value = adapter.validate_python(data)
    except PydanticValidationError as e:
        issues = issues_from_errors(e.errors(), adapter.core_schema)
        logger.debug(
            f"Validation failed with {e.error_count()} error(s) "
            f"grouped into {len(issues)} issue(s)"
        )
        return SafeParseResult(success=False, issues=issues, error=e)

    logger.debug("Validation succeeded")
    return SafeParseResult(success=True, data=value)


def _unwrap(
    node: Mapping[str, Any] | None,
    definitions: dict[str, Mapping[str, Any]],
    keep: frozenset[str] = frozenset(),
) -> Mapping[str, Any] | None:
    """Follow refs and wrapper schemas down to the node that consumes a loc."""
    while node is not None:
        if "ref" in node:
            definitions.setdefault(node["ref"], node)
        kind = node.get("type")
        if kind in keep:
            return node
        if kind == "definitions":
            for definition in node.get("definitions", []):
                definitions[definition["ref"]] = definition
            node = node.get("schema")
        elif kind == "definition-ref":
            node = definitions.get(node.get("schema_ref", ""))
        elif kind == "json-or-python":
            node = node.get("python_schema")
        elif kind == "lax-or-strict":
            node = node.get("lax_schema")
        elif kind in _WRAPPER_TYPES:
            node = node.get("schema")
        else:
            return node
    return None


def _choice_label(
    choice: Mapping[str, Any], definitions: dict[str, Mapping[str, Any]]
) -> str | None:
    node = _unwrap(choice, definitions, keep=frozenset({"model", "dataclass"}))
    if node is None:
        return None
    cls = node.get("cls")
    if cls is not None:
        return cls.__name__
    return node.get("type")


def _union_choice(
    node: Mapping[str, Any],
    segment: PathSegment,
    definitions: dict[str, Mapping[str, Any]],
) -> Mapping[str, Any] | None:
    for choice in node.get("choices", []):
        if isinstance(choice, (tuple, list)):
            schema, label = choice
        else:
            schema, label = choice, _choice_label(choice, definitions)
        if label == segment:
            return schema
    return None


def _tagged_choice(
    node: Mapping[str, Any], segment: PathSegment
) -> Mapping[str, Any] | None:
    choices = node.get("choices", {})
    for tag, schema in choices.items():
        if str(tag) == str(segment):
            # older pydantic-core aliases tags by pointing at another tag
            return choices.get(schema) if isinstance(schema, str) else schema
    return None


def _child(node: Mapping[str, Any], segment: PathSegment) -> Mapping[str, Any] | None:
    kind = node.get("type")

    if kind in ("model-fields", "typed-dict"):
        fields = node.get("fields", {})
        found = fields.get(segment) if isinstance(segment, str) else None
        if found is None:
            found = next(
                (f for f in fields.values() if f.get("validation_alias") == segment),
                None,
            )
        return found.get("schema") if found else None

    if kind == "dataclass-args":
        for f in node.get("fields", []):
            if segment in (f.get("name"), f.get("validation_alias")):
                return f.get("schema")
        return None

    if kind in _SEQUENCE_TYPES:
        return node.get("items_schema")

    if kind == "tuple" and isinstance(segment, int):
        items = node.get("items_schema", [])
        if segment < len(items):
            return items[segment]
        variadic = node.get("variadic_item_index")
        return items[variadic] if variadic is not None else None

    if kind == "dict":
        return node.get("values_schema")

    return None


def branch_labels(
    core_schema: Mapping[str, Any], loc: Sequence[PathSegment]
) -> list[tuple[int, bool]]:
    """Find the positions in ``loc`` that name a union alternative.

    Returns:
        ``(index, discriminated)`` pairs in loc order. ``discriminated`` is
        true for tags of a tagged union and false for smart union labels.
    """
    definitions: dict[str, Mapping[str, Any]] = {}
    labels: list[tuple[int, bool]] = []
    node: Mapping[str, Any] | None = core_schema

    for index, segment in enumerate(loc):
        node = _unwrap(node, definitions)
        if node is None:
            break
        kind = node.get("type")
        if kind == "union":
            labels.append((index, False))
            node = _union_choice(node, segment, definitions)
        elif kind == "tagged-union":
            labels.append((index, True))
            node = _tagged_choice(node, segment)
        else:
            node = _child(node, segment)

    return labels


@dataclass
class _UnionGroup:
    path: tuple[PathSegment, ...]
    branches: dict[PathSegment, list[ValidationIssue]] = field(default_factory=dict)

    def to_issue(self) -> ValidationIssue:
        return ValidationIssue(
            path=self.path,
            message=UNION_MESSAGE,
            kind=UNION_KIND,
            union_errors=tuple(tuple(b) for b in self.branches.values()),
        )


def issues_from_errors(
    errors: Sequence[Mapping[str, Any]], core_schema: Mapping[str, Any]
) -> list[ValidationIssue]:
    """Convert pydantic error dicts into ValidationIssues.

    Args:
        errors: Output of ``ValidationError.errors()``.
        core_schema: Core schema of the adapter that produced the errors.

    Returns:
        Issues in reported order. A regrouped union issue sits where its
        first alternative error was reported.
    """
    ordered: list[ValidationIssue | _UnionGroup] = []
    groups: dict[tuple[PathSegment, ...], _UnionGroup] = {}

    for error in errors:
        loc = tuple(error.get("loc", ()))
        message = clean_message(error.get("msg", ""))
        kind = error.get("type", "custom")
        labels = branch_labels(core_schema, loc)
        label_indexes = {index for index, _ in labels}
        union_at = next((index for index, tagged in labels if not tagged), None)

        if union_at is None:
            path = tuple(s for i, s in enumerate(loc) if i not in label_indexes)
            ordered.append(ValidationIssue(path=path, message=message, kind=kind))
            continue

        prefix = tuple(s for i, s in enumerate(loc[:union_at]) if i not in label_indexes)
        relative = tuple(
            s
            for i, s in enumerate(loc[union_at + 1 :], start=union_at + 1)
            if i not in label_indexes
        )
        group = groups.get(prefix)
        if group is None:
            group = groups[prefix] = _UnionGroup(path=prefix)
            ordered.append(group)
        group.branches.setdefault(loc[union_at], []).append(
            ValidationIssue(path=relative, message=message, kind=kind)
        )

    if groups:
        logger.debug(f"Grouped union alternatives at {len(groups)} path(s)")

    return [
        item.to_issue() if isinstance(item, _UnionGroup) else item for item in ordered
    ]
