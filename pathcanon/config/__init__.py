"""pathcanon runtime settings.

Settings are backed by environment variables following the PC_* naming
convention. Values are read once, when this module is imported.

Example:
    >>> from pathcanon.config import settings
    >>> settings.follow_symlinks
    False

Environment Variables:
    PC_FOLLOW_SYMLINKS: Resolve symlinks to their targets when absolutizing
        paths (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env(name: str, default: str) -> str:
    """Get environment variable with PC_* prefix validation."""
    if not name.startswith("PC_"):
        raise ValueError(f"Only PC_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for pathcanon.

    Frozen to prevent accidental mutation at runtime. For testing, set the
    environment before reloading this module, or pass explicit arguments to
    ``PathNormalizer``.
    """

    # Default for PathNormalizer(follow_symlinks=...)
    follow_symlinks: bool = _env_bool("PC_FOLLOW_SYMLINKS", False)


settings = Settings()

__all__ = ["settings", "Settings"]
