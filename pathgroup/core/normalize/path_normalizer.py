"""Path normalization for converting concrete paths to templates."""

from __future__ import annotations

from urllib.parse import urlsplit

from pathgroup.core.normalize.classifier import DEFAULT_CLASSIFIER, LEGACY_CLASSIFIER, Classifier
from pathgroup.models.classification import (
    WILDCARD_TOKEN,
    ClassificationResult,
    IdentifierKind,
    OutputMode,
    PathTemplate,
)


class PathNormalizer:
    """Normalize URL paths to templates with kind labels."""

    def __init__(
        self,
        mode: OutputMode | str = OutputMode.LABELS,
        classifier: Classifier | None = None,
    ) -> None:
        """Initialize normalizer.

        Args:
            mode: ``labels`` replaces identifiers with their kind label,
                ``wildcard`` reproduces the legacy ``*`` scheme
            classifier: Override the rule table. Defaults to the table that
                matches ``mode``.
        """
        self.mode = OutputMode(mode)
        if classifier is None:
            classifier = LEGACY_CLASSIFIER if self.mode is OutputMode.WILDCARD else DEFAULT_CLASSIFIER
        self.classifier = classifier

    def normalize(self, path: str) -> str:
        """Normalize a URL path to a template.

        Args:
            path: Raw URL path (e.g., /users/123/orders/booking-abc-99)

        Returns:
            Normalized path template (e.g., /users/numeric_id/orders/slug)
        """
        if path in ("", "/"):
            return path
        return "/" + "/".join(self._token(segment) for segment in split_segments(path))

    def explain(self, path: str) -> PathTemplate:
        """Normalize a path and keep the per-segment decisions."""
        results: list[ClassificationResult] = []
        for segment in split_segments(path):
            kind = self.classifier.classify(segment)
            results.append(
                ClassificationResult(segment=segment, kind=kind, token=self._render(segment, kind))
            )

        return PathTemplate(
            path=path,
            template=self.normalize(path),
            mode=self.mode,
            segments=results,
        )

    def normalize_url(self, url: str) -> tuple[str, str]:
        """Normalize a full URL (or a path with query string).

        Args:
            url: Full URL

        Returns:
            Tuple of (host, normalized_path). Host is empty for bare paths.
        """
        host, path = split_url(url)
        return host, self.normalize(path)

    def _token(self, segment: str) -> str:
        return self._render(segment, self.classifier.classify(segment))

    def _render(self, segment: str, kind: IdentifierKind) -> str:
        if kind.is_literal:
            return segment
        if self.mode is OutputMode.WILDCARD:
            return WILDCARD_TOKEN
        return kind.value


def split_url(url: str) -> tuple[str, str]:
    """Return (host, path) of a URL, ignoring query string and fragment."""
    parsed = urlsplit(url)
    return parsed.netloc, parsed.path


def split_segments(path: str) -> list[str]:
    """Split a path on ``/``, dropping empty pieces from leading, trailing or doubled slashes."""
    return [segment for segment in path.split("/") if segment]


_DEFAULT_NORMALIZER = PathNormalizer()


def normalize_path(path: str) -> str:
    """Normalize ``path`` with the default labelled scheme."""
    return _DEFAULT_NORMALIZER.normalize(path)
