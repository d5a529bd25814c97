"""
Data types shared across the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from .sources import AliasTable

# Namespace target meaning "use the namespace's own name as its directory"
USE_NAMESPACE_NAME = True

# Upper bound on alias substitutions in one chain
MAX_ALIAS_HOPS = 1000

# False: no aliasing; True/None: every alias type; str: one type; sequence: in order
AliasSpec = Union[bool, None, str, Sequence[Union[str, bool]]]

TableOrAccessor = Union[Mapping[str, Any], Callable[[], Any], None]


@dataclass
class ResolverConfig:
    """
    Resolver configuration.

    namespaces and aliases are either tables or zero-argument callables
    returning tables; basedir defaults to the working directory.
    """
    basedir: Optional[str] = None
    namespaces: TableOrAccessor = field(default_factory=dict)
    aliases: TableOrAccessor = field(default_factory=dict)


@dataclass(frozen=True)
class ResolveOptions:
    """Per-call resolution options."""
    # False: `from_` names a file and its directory anchors relative paths
    is_from_dir: bool = True

    # Force a leading "./" on relative results
    prepend_dot: bool = False

    # Follow alias chains past the first substitution
    recursive: bool = True

    # Alias table used instead of the configured one for this call
    aliases: Optional[AliasTable] = None

    @classmethod
    def coerce(cls, value: Union["ResolveOptions", Mapping[str, Any], None]) -> "ResolveOptions":
        """Accept options as an instance, a mapping of field names, or None."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"expected mapping for options, got {type(value).__name__}")
        allowed = {f.name for f in fields(cls)}
        extras = set(value.keys()) - allowed
        if extras:
            raise TypeError(f"unexpected option keys: {sorted(extras)!r}")
        return cls(**dict(value))

    def with_aliases(self, aliases: AliasTable) -> "ResolveOptions":
        return replace(self, aliases=aliases)


def alias_types_of(spec: AliasSpec) -> List[Optional[str]]:
    """
    Normalize an alias spec (not False) into an ordered list of types.

    None in the result stands for "every configured type".
    """
    if spec is True or spec is None:
        return [None]
    if isinstance(spec, str):
        return [spec]
    return [None if t is True or t is None else t for t in spec]


__all__ = [
    "USE_NAMESPACE_NAME",
    "MAX_ALIAS_HOPS",
    "AliasSpec",
    "ResolverConfig",
    "ResolveOptions",
    "alias_types_of",
]
