"""Filesystem-backed path normalization.

``PathNormalizer`` composes the pure helpers from ``canonical`` with
filesystem lookups (``lstat``/``realpath``/``exists``). Its best-effort
operations never raise on bad or missing paths: they log the failure at debug
level and return the canonicalized input, or ``False`` for existence checks.
Only ``to_string`` keeps a raising contract.

Results are snapshots of the filesystem at call time. The normalizer holds no
mutable state, so one instance can be shared between threads.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, overload

from ..config import settings
from ._types import PathInput, PathResolutionError
from .canonical import _as_text, canonicalize, is_absolute, normalize_lexically, SLASH

logger = logging.getLogger(__name__)


class PathNormalizer:
    """Absolutize, relativize and canonicalize filesystem paths.

    Args:
        follow_symlinks: When False (default), absolute resolution only checks
            that the path exists (via ``lstat``) and keeps symlinks as they are.
            When True, the path is resolved to its real target with
            ``os.path.realpath(strict=True)``. ``None`` uses
            ``settings.follow_symlinks``.
    """

    def __init__(self, *, follow_symlinks: Optional[bool] = None) -> None:
        if follow_symlinks is None:
            follow_symlinks = settings.follow_symlinks
        self._follow_symlinks = bool(follow_symlinks)

    @property
    def follow_symlinks(self) -> bool:
        return self._follow_symlinks

    def __repr__(self) -> str:
        return f"PathNormalizer(follow_symlinks={self._follow_symlinks})"

    # ---------- Filesystem resolution ----------
    def _resolve(self, text: str) -> str:
        # abspath = cwd join + lexical normalization
        absolute = os.path.abspath(text)
        if self._follow_symlinks:
            return os.path.realpath(absolute, strict=True)
        os.lstat(absolute)
        return absolute

    def to_string(self, path: PathInput) -> str:
        """Resolve ``path`` on the filesystem and return it canonicalized.

        Raises:
            PathResolutionError: If the path does not exist, cannot be read,
                or is syntactically invalid (e.g. contains a NUL character).
        """
        text = _as_text(path)
        try:
            resolved = self._resolve(text)
        except (OSError, ValueError) as e:
            raise PathResolutionError(f"cannot resolve path: {text!r}") from e
        return canonicalize(resolved)

    def resolve_absolute(self, path: PathInput) -> str:
        """Return the absolute, filesystem-resolved form of ``path``.

        If the path cannot be resolved (it does not exist, an I/O error occurs,
        or it is malformed), ``path`` is returned unchanged apart from
        canonicalization (``/`` separators, uppercase drive letter).
        """
        try:
            return self.to_string(path)
        except PathResolutionError as e:
            logger.debug("resolve_absolute fell back to input: %s", e.__cause__)
            return canonicalize(path)

    def resolve_relative(self, base: PathInput, path: PathInput) -> str:
        """Return ``path`` relative to the directory ``base``.

        Both are resolved on the filesystem first, which may yield a different
        absolute location than their text suggests. A relative ``path`` is
        interpreted against ``base``. When ``path`` is ``base`` itself the
        result is the empty string.

        On any failure (missing file, filesystem error, malformed input, paths
        on different drives) ``path`` is returned canonicalized but otherwise
        unchanged.
        """
        path_text = _as_text(path)
        try:
            base_text = _as_text(base)
            normalized_base = self._resolve(base_text)
            if os.path.isabs(path_text):
                target = self._resolve(path_text)
            else:
                target = self._resolve(os.path.join(base_text, path_text))
            relative = os.path.relpath(target, normalized_base)
        except (OSError, ValueError) as e:
            logger.debug("resolve_relative fell back to input %r: %s", path_text, e)
            return canonicalize(path_text)
        if relative == os.curdir:
            return ""
        return canonicalize(relative)

    # ---------- Existence ----------
    @overload
    def exists(self, file_name: PathInput, /) -> bool: ...

    @overload
    def exists(self, directory: Optional[str], file_name: str, /) -> bool: ...

    def exists(self, first, second=None, /) -> bool:
        """Test whether a file exists.

        Called as ``exists(file_name)`` or ``exists(directory, file_name)``; the
        two-argument form joins its arguments with ``join_and_normalize``
        first.

        The result is outdated as soon as it is returned. ``True`` does not
        guarantee that a later access will succeed, so do not rely on it in
        security-sensitive code.

        Returns:
            True if the file exists; False if it does not or its existence
            cannot be determined (including malformed names).
        """
        if second is None:
            file_name = _as_text(first)
        else:
            file_name = self.join_and_normalize(first, second)
        # os.path.exists reports OSError and ValueError (embedded NUL) as False
        return os.path.exists(file_name)

    # ---------- Lexical helpers ----------
    def join_and_normalize(self, directory: Optional[str], file_name: str) -> str:
        """Return the path of ``file_name`` inside ``directory``.

        An absolute ``file_name`` or a blank ``directory`` leaves ``file_name``
        as is. Otherwise the two are joined with a single ``/`` and
        ``.``/``..`` segments are collapsed without touching the filesystem.
        If that collapse fails (e.g. it would climb above the root),
        ``file_name`` is used instead. The result is always canonicalized.
        """
        if self.is_absolute(file_name) or directory is None or not directory.strip():
            return canonicalize(file_name)

        path = canonicalize(directory)
        separator = "" if path.endswith(SLASH) else SLASH
        normalized = normalize_lexically(path + separator + file_name)
        if normalized is None:
            logger.debug("join_and_normalize could not normalize %r in %r", file_name, directory)
            return canonicalize(file_name)
        return canonicalize(normalized)

    def is_absolute(self, file_name: PathInput) -> bool:
        """Return True if ``file_name`` has a POSIX, Windows, UNC or ``~`` root prefix."""
        return is_absolute(file_name)


__all__ = ["PathNormalizer"]
