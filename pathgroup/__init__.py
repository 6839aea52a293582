"""pathgroup: collapse concrete request paths into stable path templates."""

from pathgroup.core.normalize import (
    Classifier,
    PathGroupAggregator,
    PathNormalizer,
    classify_segment,
    normalize_path,
)
from pathgroup.host.middleware import PathGroupMiddleware
from pathgroup.models import IdentifierKind, OutputMode
from pathgroup.utils.config import ConfigError, PathGroupConfig, load_config

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "Classifier",
    "classify_segment",
    "PathNormalizer",
    "normalize_path",
    "PathGroupAggregator",
    "PathGroupMiddleware",
    "IdentifierKind",
    "OutputMode",
    "PathGroupConfig",
    "ConfigError",
    "load_config",
]
