"""
Alias substitution.

Rewrites an already resolved path through an alias table, following
chains of aliases up to MAX_ALIAS_HOPS substitutions.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .errors import CyclicAliasError
from .keys import alias_candidates
from .paths import resolve_path
from .types import MAX_ALIAS_HOPS

logger = logging.getLogger(__name__)


def _lookup(entries: Mapping[str, str], resolved: str, basedir: str) -> Optional[str]:
    for key in alias_candidates(resolved, basedir):
        if key in entries:
            return entries[key]
    return None


def resolve_alias(
    path: str,
    alias_type: Optional[str],
    aliases: Mapping[str, Mapping[str, str]],
    basedir: str,
    recursive: bool = True,
) -> Optional[str]:
    """
    Substitute `path` through the alias table.

    Args:
        path: Resolved path (relative paths are anchored at basedir)
        alias_type: Alias bucket to use; None tries every bucket in table order
        aliases: Alias table (type -> {key: replacement})
        basedir: Absolute base directory
        recursive: Follow the chain past the first substitution

    Returns:
        Absolute substituted path, or None when no alias applies

    Raises:
        CyclicAliasError: The chain did not settle within MAX_ALIAS_HOPS
    """
    if alias_type is None:
        for t in aliases:
            resolved = resolve_alias(path, t, aliases, basedir, recursive)
            if resolved is not None:
                return resolved
        return None

    entries = aliases.get(alias_type)
    if not entries:
        return None

    resolved = resolve_path(basedir, path)

    for index in range(MAX_ALIAS_HOPS):
        target = _lookup(entries, resolved, basedir)
        if target is None:
            return None if index == 0 else resolved

        replaced = resolve_path(basedir, target)
        logger.debug(f"Alias [{alias_type}] hop {index + 1}: {resolved} -> {replaced}")
        resolved = replaced

        if index == 0 and not recursive:
            return resolved

    raise CyclicAliasError(path, alias_type, MAX_ALIAS_HOPS)


__all__ = ["resolve_alias"]
