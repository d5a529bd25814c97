"""
Namespace expansion.

Namespaces: pages, mails

    pages/path/to/file.ext + ::relative/to/ns       ->  pages/relative/to/ns
    pages/path/to/file.ext + mails::relative/to/ns  ->  mails/relative/to/ns
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .errors import (
    ConfigLoadError,
    EmptyFromForImplicitNamespaceError,
    MissingNamespaceSeparatorError,
    NamespaceNotFoundError,
)
from .paths import join_path, resolve_path
from .types import USE_NAMESPACE_NAME

logger = logging.getLogger(__name__)

NS_DELIMITER = "::"


def namespace_dirs(table: Mapping[str, Any], basedir: str) -> Dict[str, str]:
    """Resolve every namespace target to an absolute directory."""
    out: Dict[str, str] = {}
    for name, target in table.items():
        if target is USE_NAMESPACE_NAME:
            out[name] = resolve_path(basedir, name)
        elif isinstance(target, str):
            out[name] = resolve_path(basedir, target)
        else:
            raise ConfigLoadError(
                f"namespace target must be true or a path string, got {target!r}",
                path=("namespaces", str(name)),
            )
    return out


def longest_prefix_namespace(dirs: Mapping[str, str], from_abs: str) -> Optional[str]:
    """Name of the deepest namespace directory that prefixes `from_abs`."""
    best: Optional[str] = None
    best_len = 0
    for name, ns_dir in dirs.items():
        if from_abs.startswith(ns_dir) and len(ns_dir) > best_len:
            best, best_len = name, len(ns_dir)
    return best


def resolve_namespace(
    path: str,
    from_: Optional[str],
    table: Mapping[str, Any],
    basedir: str,
) -> str:
    """
    Expand a namespaced reference into a path under its namespace directory.

    Args:
        path: Reference containing "::" ("tag::rest" or "::rest")
        from_: Referencing path, required for the implicit "::rest" form
        table: Namespace table (name -> True or directory)
        basedir: Absolute base directory

    Returns:
        Normalized path; absolute unless no namespace matched an implicit reference

    Raises:
        MissingNamespaceSeparatorError: path has no "::"
        EmptyFromForImplicitNamespaceError: "::rest" without from_
        NamespaceNotFoundError: "tag::rest" with an unknown tag
    """
    pos = path.find(NS_DELIMITER)
    if pos == -1:
        raise MissingNamespaceSeparatorError(path)

    dirs = namespace_dirs(table, basedir)

    if pos == 0:
        # Infer namespace from the referencing path
        if from_ is None or from_ == "":
            raise EmptyFromForImplicitNamespaceError(path)
        from_abs = resolve_path(basedir, str(from_))
        name = longest_prefix_namespace(dirs, from_abs)
        token = NS_DELIMITER
        target_dir = dirs[name] if name is not None else ""
        logger.debug(f"Implicit namespace for '{path}' from '{from_abs}': {name or '<basedir>'}")
    else:
        name = path[:pos]
        if name not in dirs:
            raise NamespaceNotFoundError(name, path=path, available=sorted(dirs))
        token = name + NS_DELIMITER
        target_dir = dirs[name]

    return join_path(target_dir, path.replace(token, "", 1))


__all__ = ["NS_DELIMITER", "namespace_dirs", "longest_prefix_namespace", "resolve_namespace"]
