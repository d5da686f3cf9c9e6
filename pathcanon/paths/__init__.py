"""Path canonicalization and filesystem resolution."""

from ._types import PathInput, PathResolutionError
from .canonical import canonicalize, is_absolute, normalize_lexically
from .normalizer import PathNormalizer

__all__ = [
    "PathInput",
    "PathResolutionError",
    "PathNormalizer",
    "canonicalize",
    "is_absolute",
    "normalize_lexically",
]
