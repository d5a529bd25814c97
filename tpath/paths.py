"""
Path algebra used by the resolver.

Pure string operations on top of os.path: nothing here touches the
filesystem. resolve_path() follows absolute-path semantics (a later
absolute segment restarts the path), join_path() simply concatenates.
"""

from __future__ import annotations

import os


def _collapse_root(path: str) -> str:
    # POSIX normpath keeps exactly two leading slashes; a single root is wanted
    if os.sep == "/" and path.startswith("//"):
        return "/" + path.lstrip("/")
    return path


def resolve_path(*segments: str) -> str:
    """
    Resolve segments right to left into a normalized absolute path.

    Empty segments are ignored; with nothing left the working directory
    is returned.
    """
    parts = [s for s in segments if s]
    if not parts:
        return os.path.abspath(os.curdir)
    return _collapse_root(os.path.abspath(os.path.join(*parts)))


def join_path(*segments: str) -> str:
    """
    Concatenate segments and normalize the result.

    Unlike resolve_path(), a segment starting with a separator does not
    discard what precedes it: join_path("/ns", "/x") == "/ns/x".
    """
    parts = [s for s in segments if s]
    if not parts:
        return os.curdir
    return _collapse_root(os.path.normpath(os.sep.join(parts)))


def dirname(path: str) -> str:
    return os.path.dirname(path)


def relative_path(start: str, target: str) -> str:
    """
    Relative path from directory `start` to `target`.

    Both sides are made absolute first. A path relative to itself is "".
    """
    rel = os.path.relpath(resolve_path(target), resolve_path(start))
    return "" if rel == os.curdir else rel


def is_dot_path(path: str) -> bool:
    """Dot-relative references: "./x", "../x", ".", ".hidden"."""
    return path.startswith(".")


__all__ = ["resolve_path", "join_path", "dirname", "relative_path", "is_dot_path"]
