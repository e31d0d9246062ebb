"""
Uploadable Directory Helper — string-level path canonicalization.

Nothing here touches the filesystem: paths are normalized purely as strings so
they can be configured before the directories exist.
"""

from __future__ import annotations

import posixpath
import re
from typing import Tuple

_DRIVE_RE = re.compile(r"^[A-Za-z]:")


def _split_drive(path: str) -> Tuple[str, str]:
    match = _DRIVE_RE.match(path)
    if match:
        return match.group(0), path[match.end():]
    return "", path


def is_absolute(path: str) -> bool:
    """True for paths rooted at a separator, with or without a drive prefix."""
    _, rest = _split_drive(path.replace("\\", "/"))
    return rest.startswith("/")


def canonicalize(path: str) -> str:
    """
    Normalize a path string with '/' separators.

    Examples:
        canonicalize("a/b/../c")              → "a/c"
        canonicalize("/var//www/./up/")       → "/var/www/up"
        canonicalize("C:\\up\\..\\img")        → "C:/img"
        canonicalize("\\\\server\\share\\up")  → "//server/share/up"
        canonicalize("../x/../../y")          → "../../y"

    A UNC "//" prefix is kept. Drive-relative paths such as "C:img" are
    treated as relative: they are not rooted, so callers joining them onto
    another directory get "<dir>/C:img".
    """
    if path == "":
        return ""

    drive, rest = _split_drive(path.replace("\\", "/"))
    if rest == "":
        return drive

    normalized = posixpath.normpath(rest)
    if drive and normalized == ".":
        return drive
    return f"{drive}{normalized}"


def join(*parts: str) -> str:
    """Join path parts with '/' and canonicalize; empty parts are skipped."""
    return canonicalize("/".join(p for p in parts if p))
