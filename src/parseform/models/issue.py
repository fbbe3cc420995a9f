"""Validation issue model consumed by the error flattener."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from parseform.config.defaults import UNION_KIND

PathSegment = str | int


class ValidationIssue(BaseModel):
    """One problem reported by the schema engine.

    Attributes:
        path: Location of the offending value; empty means the root value.
        message: Human-readable description, as produced by the schema.
        kind: Failure category (``missing``, ``literal_error``,
            ``invalid_union``, ...).
        union_errors: For ``invalid_union`` issues, one tuple of issues per
            attempted alternative. Sub-issue paths are relative to ``path``.
    """

    model_config = ConfigDict(frozen=True)

    path: tuple[PathSegment, ...] = ()
    message: str
    kind: str = "custom"
    union_errors: tuple[tuple[ValidationIssue, ...], ...] = Field(default=())

    @property
    def is_union(self) -> bool:
        """Whether this issue carries alternative branches to expand."""
        return self.kind == UNION_KIND and bool(self.union_errors)

    def prefixed(self, prefix: tuple[PathSegment, ...]) -> ValidationIssue:
        """Return a copy with ``prefix`` prepended to the path."""
        if not prefix:
            return self
        return self.model_copy(update={"path": (*prefix, *self.path)})
