"""Segment classification data models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

WILDCARD_TOKEN = "*"


class IdentifierKind(StrEnum):
    """Kind of identifier detected in a path segment.

    The value of every kind except ``LITERAL`` is the label substituted into
    the path template.
    """

    UUID = "uuid"
    NUMERIC_ID = "numeric_id"
    ISO_DATE = "iso_date"
    ULID = "ulid"
    CUID = "cuid"
    CUID2 = "cuid2"
    NANOID = "nanoid"
    FILE = "file"
    SLUG = "slug"
    LITERAL = "literal"

    @property
    def is_literal(self) -> bool:
        return self is IdentifierKind.LITERAL


class OutputMode(StrEnum):
    """How replaced segments are rendered in a template."""

    LABELS = "labels"
    WILDCARD = "wildcard"  # legacy scheme: every replaced segment becomes "*"


class ClassificationResult(BaseModel):
    """A path segment paired with the kind it was classified as."""

    segment: str
    kind: IdentifierKind
    token: str  # What the segment contributes to the template


class PathTemplate(BaseModel):
    """A normalized path and the per-segment decisions behind it."""

    path: str
    template: str
    mode: OutputMode = OutputMode.LABELS
    segments: list[ClassificationResult] = Field(default_factory=list)

    @property
    def replaced(self) -> list[ClassificationResult]:
        """Segments that were replaced by a label or wildcard."""
        return [s for s in self.segments if not s.kind.is_literal]


class PathGroup(BaseModel):
    """Concrete paths bucketed under one template."""

    template: str
    count: int = 0
    kinds: list[IdentifierKind] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
