"""
Exceptions raised by the template path resolver.

Everything a user can fix (bad references, bad configuration) inherits
from TPathUserError so the CLI can print a clean message instead of a
traceback. Programming errors are left to propagate as they are.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


class TPathUserError(Exception):
    """Base class for all user-facing errors in tpath."""
    pass


class ResolverError(TPathUserError):
    """Base class for reference resolution failures."""
    pass


@dataclass
class MissingNamespaceSeparatorError(ResolverError):
    """Namespace resolution was asked to handle a path without '::'."""
    path: str

    def __str__(self) -> str:
        return f"Path does not contain namespace separator '::': {self.path}"


@dataclass
class EmptyFromForImplicitNamespaceError(ResolverError):
    """'::rest' used without a referencing path to infer the namespace from."""
    path: str

    def __str__(self) -> str:
        return (
            f"Cannot resolve '{self.path}': implicit namespace requires "
            f"a non-empty 'from' path"
        )


@dataclass
class NamespaceNotFoundError(ResolverError):
    """Explicit 'tag::rest' with a tag missing from the namespace table."""
    namespace: str
    path: str = ""
    available: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        msg = f"Namespace '{self.namespace}' not found"
        if self.path:
            msg += f" (in '{self.path}')"
        if self.available:
            msg += f". Available namespaces: {', '.join(self.available)}"
        return msg


@dataclass
class CyclicAliasError(ResolverError):
    """Alias substitution chain did not terminate within the hop limit."""
    path: str
    alias_type: Optional[str]
    hops: int

    def __str__(self) -> str:
        return (
            f"Infinite loop detected while resolving aliases of type "
            f"'{self.alias_type}' for '{self.path}' (gave up after {self.hops} hops)"
        )


class ConfigLoadError(TPathUserError):
    """Invalid resolver configuration, with the offending field path."""
    def __init__(self, message: str, path: tuple[str, ...] = (), source: Optional[str] = None):
        self.path = path
        self.source = source
        prefix = f"{'.'.join(path)}: " if path else ""
        where = f" ({source})" if source else ""
        super().__init__(prefix + message + where)


__all__ = [
    "TPathUserError",
    "ResolverError",
    "MissingNamespaceSeparatorError",
    "EmptyFromForImplicitNamespaceError",
    "NamespaceNotFoundError",
    "CyclicAliasError",
    "ConfigLoadError",
]
