"""Grouping of concrete request paths under their templates."""

from __future__ import annotations

from collections.abc import Iterable

from pathgroup.core.normalize.path_normalizer import PathNormalizer
from pathgroup.models.classification import PathGroup


class PathGroupAggregator:
    """Aggregate concrete paths into template groups."""

    def __init__(
        self,
        normalizer: PathNormalizer | None = None,
        max_examples: int = 3,
    ) -> None:
        """Initialize aggregator.

        Args:
            normalizer: PathNormalizer used to compute templates
            max_examples: Distinct concrete paths kept per group
        """
        self.normalizer = normalizer or PathNormalizer()
        self.max_examples = max_examples
        self._groups: dict[str, PathGroup] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def add(self, path: str) -> str | None:
        """Record one path. Returns its template, or None for blank input."""
        path = path.strip()
        if not path:
            return None

        explained = self.normalizer.explain(path)
        group = self._groups.get(explained.template)
        if group is None:
            group = PathGroup(template=explained.template)
            self._groups[explained.template] = group

        group.count += 1
        for result in explained.replaced:
            if result.kind not in group.kinds:
                group.kinds.append(result.kind)
        if len(group.examples) < self.max_examples and path not in group.examples:
            group.examples.append(path)

        return explained.template

    def add_many(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add(path)

    def groups(self) -> list[PathGroup]:
        """Return groups, most frequent first."""
        ordered = sorted(self._groups.values(), key=lambda g: (-g.count, g.template))
        return [
            g.model_copy(update={"kinds": sorted(g.kinds)})
            for g in ordered
        ]
