"""
Template path resolver.

Resolves template references (dot-relative, namespaced, aliased)
into paths under a base directory.
"""

from .types import (
    AliasSpec,
    MAX_ALIAS_HOPS,
    ResolveOptions,
    ResolverConfig,
    USE_NAMESPACE_NAME,
)

from .sources import AccessorSource, ConfigSource, ConstantSource, as_source

from .resolver import PathResolver

from .config import DEFAULT_CFG_FILE, config_from_dict, load_config, resolver_from_file

from .errors import (
    TPathUserError,
    ResolverError,
    MissingNamespaceSeparatorError,
    EmptyFromForImplicitNamespaceError,
    NamespaceNotFoundError,
    CyclicAliasError,
    ConfigLoadError,
)


__all__ = [
    # Types
    "AliasSpec",
    "MAX_ALIAS_HOPS",
    "ResolveOptions",
    "ResolverConfig",
    "USE_NAMESPACE_NAME",

    # Sources
    "ConfigSource",
    "ConstantSource",
    "AccessorSource",
    "as_source",

    # Main classes
    "PathResolver",

    # Configuration files
    "DEFAULT_CFG_FILE",
    "config_from_dict",
    "load_config",
    "resolver_from_file",

    # Exceptions
    "TPathUserError",
    "ResolverError",
    "MissingNamespaceSeparatorError",
    "EmptyFromForImplicitNamespaceError",
    "NamespaceNotFoundError",
    "CyclicAliasError",
    "ConfigLoadError",
]
