"""pathcanon: deterministic, cross-platform path normalization."""

from .config import Settings, settings
from .paths import (
    PathInput,
    PathNormalizer,
    PathResolutionError,
    canonicalize,
    is_absolute,
    normalize_lexically,
)

__all__ = [
    "PathInput",
    "PathNormalizer",
    "PathResolutionError",
    "Settings",
    "canonicalize",
    "is_absolute",
    "normalize_lexically",
    "settings",
]
