"""
Alias key spellings.

Alias tables may be written on any platform, with either separator
style, and with absolute or basedir-relative keys. alias_candidates()
enumerates every spelling a resolved path may have been keyed under.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .paths import relative_path

_SEPARATORS = re.compile(r"[\\/]+")


def to_posix(path: str) -> str:
    """Spell a path with forward slashes (runs of separators collapsed)."""
    return _SEPARATORS.sub("/", path)


def to_windows(path: str) -> str:
    """Spell a path with backslashes (runs of separators collapsed)."""
    return _SEPARATORS.sub(r"\\", path)


def spellings(path: str) -> List[str]:
    """The path as given, then its POSIX and Windows spellings, without duplicates."""
    out: List[str] = []
    for p in (path, to_posix(path), to_windows(path)):
        if p not in out:
            out.append(p)
    return out


def alias_candidates(resolved: str, basedir: Optional[str]) -> List[str]:
    """
    Candidate alias keys for an absolute path, most specific first.

    When the path lies under basedir (plain string prefix), the
    basedir-relative path is offered as well, in every spelling.
    """
    out = spellings(resolved)
    if basedir and resolved.startswith(basedir):
        for p in spellings(relative_path(basedir, resolved)):
            if p not in out:
                out.append(p)
    return out


__all__ = ["to_posix", "to_windows", "spellings", "alias_candidates"]
