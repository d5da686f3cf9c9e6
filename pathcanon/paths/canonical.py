"""Pure string canonicalization for filesystem paths.

Nothing in this module touches the filesystem. The functions accept POSIX and
Windows-style input on every host so that paths recorded on one platform can
be compared on another.

Key functions:
- canonicalize: forward slashes and an uppercase lowercase-drive letter
- is_absolute: root prefix detection delegated to ``ntpath``
- normalize_lexically: collapse ``.``/``..``/repeated separators
"""

from __future__ import annotations

import ntpath
import os
import re
from typing import Optional

from ._types import PathInput

BACK_SLASH = "\\"
SLASH = "/"

# Whole-string match; ``.`` stops at newlines like the original rule.
_DRIVE_LETTER_PREFIX = re.compile(r"[a-z]:/.*")


def _as_text(path: PathInput) -> str:
    if isinstance(path, str):
        return path
    return os.fspath(path)


def canonicalize(path: PathInput) -> str:
    """Return ``path`` with ``/`` separators and a capitalized drive letter.

    Only a single lowercase letter followed by ``:/`` is rewritten
    (``c:/x`` becomes ``C:/x``); uppercase or longer prefixes are left alone.
    The function is idempotent.
    """
    unix_style = _as_text(path).replace(BACK_SLASH, SLASH)
    if _DRIVE_LETTER_PREFIX.fullmatch(unix_style):
        unix_style = unix_style[0].upper() + unix_style[1:]
    return unix_style


def _split_prefix(text: str) -> tuple[str, str]:
    """Split ``text`` into (root prefix, remainder).

    Drive, UNC and separator roots come from ``ntpath.splitroot``; a leading
    ``~`` or ``~user`` segment is treated as a home-directory prefix.
    """
    if text.startswith("~"):
        end = min((i for i in (text.find(SLASH), text.find(BACK_SLASH)) if i >= 0), default=-1)
        if end < 0:
            return text, ""
        return text[: end + 1], text[end + 1 :]
    drive, root, tail = ntpath.splitroot(text)
    return drive + root, tail


def is_absolute(file_name: PathInput) -> bool:
    """Return True if ``file_name`` starts with a root prefix.

    Recognized prefixes: ``/``, ``\\``, ``C:``, ``C:/``, ``C:\\``, UNC shares
    (``//server/share``) and ``~``.
    """
    prefix, _ = _split_prefix(_as_text(file_name))
    return bool(prefix)


def normalize_lexically(path: PathInput) -> Optional[str]:
    """Collapse ``.``, ``..`` and repeated separators without filesystem access.

    The root prefix and a trailing separator are kept. Returns ``None`` when a
    ``..`` segment would climb above the start of the path or the input holds
    a NUL character.

    Examples:
        >>> normalize_lexically("/a/./b//c/../d")
        '/a/b/d'
        >>> normalize_lexically("a/b/../")
        'a/'
        >>> normalize_lexically("../x") is None
        True
    """
    text = _as_text(path)
    if "\x00" in text:
        return None

    prefix, tail = _split_prefix(text.replace(BACK_SLASH, SLASH))
    segments = tail.split(SLASH)
    keep_trailing = bool(tail) and segments[-1] in ("", ".", "..")

    stack: list[str] = []
    for segment in segments:
        if not segment or segment == ".":
            continue
        if segment == "..":
            if not stack:
                return None
            stack.pop()
        else:
            stack.append(segment)

    normalized = prefix + SLASH.join(stack)
    if keep_trailing and stack:
        normalized += SLASH
    return normalized


__all__ = [
    "canonicalize",
    "is_absolute",
    "normalize_lexically",
]
