from __future__ import annotations

import os
from typing import Union

# Anything os.fspath() turns into text: plain strings and pathlib objects.
PathInput = Union[str, os.PathLike[str]]


class PathResolutionError(OSError):
    """Raised when a path cannot be resolved on the real filesystem.

    Only the strict ``PathNormalizer.to_string`` raises this; the best-effort
    operations fall back to the canonicalized input instead.
    """
