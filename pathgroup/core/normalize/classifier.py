"""Ordered, table-driven classification of single path segments.

A segment is run through an immutable table of rules. The first rule that
resolves the segment decides its kind and later rules are never consulted, so
rules may overlap freely: the table order is the disambiguation contract.

Default order:

1. UUID
2. numeric ID
3. ISO date / datetime
4. ULID
5. CUID
6. CUID2
7. NanoID
8. file name
9. prefixed ID (``usr:<id>``, ``usr_<id>``)
10. slug
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from re import Pattern

from pathgroup.core.normalize.patterns import (
    CUID2_PATTERN,
    CUID_PATTERN,
    FILE_PATTERN,
    ISO_DATE_PATTERN,
    MIN_PREFIXED_NUMERIC_LENGTH,
    NANOID_PATTERN,
    NUMERIC_PATTERN,
    PREFIX_PATTERN,
    SLUG_CHARSET_PATTERN,
    ULID_PATTERN,
    UUID_PATTERN,
)
from pathgroup.models.classification import IdentifierKind

SuffixClassifier = Callable[[str], IdentifierKind]
Resolver = Callable[[str, SuffixClassifier], IdentifierKind | None]


@dataclass(frozen=True)
class Rule:
    """One entry of the classification table.

    ``resolve`` returns the kind for a segment it recognizes, or None to let
    the next rule try. Rules marked ``recursive`` receive a callback that
    classifies a sub-string; they are skipped while classifying that
    sub-string, which bounds recursion to a single level.
    """

    name: str
    resolve: Resolver
    recursive: bool = False


def pattern_rule(kind: IdentifierKind, pattern: Pattern[str]) -> Rule:
    """Build a rule that yields ``kind`` when ``pattern`` matches the whole segment."""

    def resolve(segment: str, _classify_suffix: SuffixClassifier) -> IdentifierKind | None:
        return kind if pattern.fullmatch(segment) else None

    return Rule(name=kind.value, resolve=resolve)


def _resolve_slug(segment: str, _classify_suffix: SuffixClassifier) -> IdentifierKind | None:
    if not SLUG_CHARSET_PATTERN.fullmatch(segment):
        return None
    has_digit = any("0" <= ch <= "9" for ch in segment)
    has_separator = "-" in segment or "_" in segment
    return IdentifierKind.SLUG if has_digit and has_separator else None


# Kinds an underscore-separated suffix must match on its own before the
# prefix is discarded. Plain numbers are handled separately by length.
_UNDERSCORE_SUFFIX_PATTERNS: tuple[Pattern[str], ...] = (
    UUID_PATTERN,
    ISO_DATE_PATTERN,
    ULID_PATTERN,
    CUID_PATTERN,
    CUID2_PATTERN,
    NANOID_PATTERN,
)


def _split_prefixed(segment: str, separator: str) -> tuple[str, str] | None:
    idx = segment.find(separator)
    if idx <= 0:
        return None
    prefix, suffix = segment[:idx], segment[idx + 1:]
    if not suffix or not PREFIX_PATTERN.fullmatch(prefix):
        return None
    return prefix, suffix


def _resolve_prefixed_id(segment: str, classify_suffix: SuffixClassifier) -> IdentifierKind | None:
    # prefix:<anything recognized>
    parts = _split_prefixed(segment, ":")
    if parts is not None:
        kind = classify_suffix(parts[1])
        if not kind.is_literal:
            return kind

    # prefix_<strong id> or prefix_<3+ digits>
    parts = _split_prefixed(segment, "_")
    if parts is not None:
        suffix = parts[1]
        if any(p.fullmatch(suffix) for p in _UNDERSCORE_SUFFIX_PATTERNS):
            kind = classify_suffix(suffix)
            if not kind.is_literal:
                return kind
        elif NUMERIC_PATTERN.fullmatch(suffix) and len(suffix) >= MIN_PREFIXED_NUMERIC_LENGTH:
            return IdentifierKind.NUMERIC_ID

    return None


UUID_RULE = pattern_rule(IdentifierKind.UUID, UUID_PATTERN)
NUMERIC_ID_RULE = pattern_rule(IdentifierKind.NUMERIC_ID, NUMERIC_PATTERN)
ISO_DATE_RULE = pattern_rule(IdentifierKind.ISO_DATE, ISO_DATE_PATTERN)
ULID_RULE = pattern_rule(IdentifierKind.ULID, ULID_PATTERN)
CUID_RULE = pattern_rule(IdentifierKind.CUID, CUID_PATTERN)
CUID2_RULE = pattern_rule(IdentifierKind.CUID2, CUID2_PATTERN)
NANOID_RULE = pattern_rule(IdentifierKind.NANOID, NANOID_PATTERN)
FILE_RULE = pattern_rule(IdentifierKind.FILE, FILE_PATTERN)
PREFIXED_ID_RULE = Rule(name="prefixed_id", resolve=_resolve_prefixed_id, recursive=True)
SLUG_RULE = Rule(name=IdentifierKind.SLUG.value, resolve=_resolve_slug)

DEFAULT_RULES: tuple[Rule, ...] = (
    UUID_RULE,
    NUMERIC_ID_RULE,
    ISO_DATE_RULE,
    ULID_RULE,
    CUID_RULE,
    CUID2_RULE,
    NANOID_RULE,
    FILE_RULE,
    PREFIXED_ID_RULE,
    SLUG_RULE,
)

# The historical wildcard scheme only knew about these three shapes.
LEGACY_RULES: tuple[Rule, ...] = (
    UUID_RULE,
    NUMERIC_ID_RULE,
    SLUG_RULE,
)


class Classifier:
    """Classify path segments by walking an ordered rule table."""

    def __init__(self, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
        """Initialize classifier.

        Args:
            rules: Rules in evaluation order. The first rule that resolves a
                segment wins.
        """
        self._rules = tuple(rules)
        self._nested_rules = tuple(rule for rule in self._rules if not rule.recursive)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def rule_names(self) -> list[str]:
        return [rule.name for rule in self._rules]

    def classify(self, segment: str) -> IdentifierKind:
        """Classify a single path segment.

        Never raises: anything no rule recognizes is ``IdentifierKind.LITERAL``.

        Args:
            segment: One path segment (no slashes)

        Returns:
            The kind of the first matching rule
        """
        return self._walk(segment, self._rules)

    def _classify_suffix(self, segment: str) -> IdentifierKind:
        return self._walk(segment, self._nested_rules)

    def _walk(self, segment: str, rules: tuple[Rule, ...]) -> IdentifierKind:
        if not segment:
            return IdentifierKind.LITERAL
        for rule in rules:
            kind = rule.resolve(segment, self._classify_suffix)
            if kind is not None:
                return kind
        return IdentifierKind.LITERAL


DEFAULT_CLASSIFIER = Classifier()
LEGACY_CLASSIFIER = Classifier(LEGACY_RULES)


def classify_segment(segment: str) -> IdentifierKind:
    """Classify ``segment`` with the default rule table."""
    return DEFAULT_CLASSIFIER.classify(segment)
