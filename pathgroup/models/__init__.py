"""Pydantic data models for pathgroup."""

from pathgroup.models.classification import (
    WILDCARD_TOKEN,
    ClassificationResult,
    IdentifierKind,
    OutputMode,
    PathGroup,
    PathTemplate,
)

__all__ = [
    "WILDCARD_TOKEN",
    "IdentifierKind",
    "OutputMode",
    "ClassificationResult",
    "PathTemplate",
    "PathGroup",
]
