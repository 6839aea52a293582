"""Path template normalization modules."""

from pathgroup.core.normalize.aggregator import PathGroupAggregator
from pathgroup.core.normalize.classifier import Classifier, Rule, classify_segment
from pathgroup.core.normalize.path_normalizer import PathNormalizer, normalize_path

__all__ = [
    "Classifier",
    "Rule",
    "classify_segment",
    "PathNormalizer",
    "normalize_path",
    "PathGroupAggregator",
]
