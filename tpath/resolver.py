"""
Template path resolver.

Turns logical template references into absolute paths under a base
directory:

    ./partial, ../shared/header   relative to the referencing template
    pages::about                  inside namespace "pages"
    ::sibling                     inside the referencing template's namespace
    anything else                 returned untouched

and optionally redirects the result through alias tables.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from .aliases import resolve_alias
from .namespaces import NS_DELIMITER, namespace_dirs, resolve_namespace
from .paths import dirname, is_dot_path, relative_path, resolve_path
from .sources import AliasTable, ConfigSource, NamespaceTable, as_source
from .types import AliasSpec, ResolveOptions, ResolverConfig, TableOrAccessor, alias_types_of

logger = logging.getLogger(__name__)

OptionsArg = Union[ResolveOptions, Mapping[str, Any], None]


class PathResolver:
    """
    Resolves template references against a fixed base directory.

    Namespace and alias tables are read through ConfigSource objects on
    every call, so callable-backed tables may change between calls.
    The tables may be swapped with set_namespaces()/set_aliases();
    basedir never changes after construction.
    """

    def __init__(self, config: Optional[ResolverConfig] = None, **overrides: Any):
        """
        Initialize resolver.

        Args:
            config: Resolver configuration
            **overrides: Individual ResolverConfig fields (basedir, namespaces, aliases)
        """
        if config is None:
            config = ResolverConfig(**overrides)
        elif overrides:
            config = ResolverConfig(
                basedir=overrides.get("basedir", config.basedir),
                namespaces=overrides.get("namespaces", config.namespaces),
                aliases=overrides.get("aliases", config.aliases),
            )

        self._basedir = resolve_path(config.basedir) if config.basedir else os.getcwd()
        self._lock = threading.Lock()
        self._namespaces: ConfigSource[NamespaceTable] = as_source(config.namespaces)
        self._aliases: ConfigSource[AliasTable] = as_source(config.aliases)

    def __repr__(self) -> str:
        return f"PathResolver(basedir={self._basedir!r})"

    @property
    def basedir(self) -> str:
        """Absolute base directory."""
        return self._basedir

    # ---------------------------- configuration ---------------------------- #

    def set_namespaces(self, namespaces: TableOrAccessor) -> "PathResolver":
        source = as_source(namespaces)
        with self._lock:
            self._namespaces = source
        return self

    def set_aliases(self, aliases: TableOrAccessor) -> "PathResolver":
        source = as_source(aliases)
        with self._lock:
            self._aliases = source
        return self

    def _namespace_table(self) -> NamespaceTable:
        with self._lock:
            source = self._namespaces
        return source.current()

    def _alias_table(self) -> AliasTable:
        with self._lock:
            source = self._aliases
        return source.current()

    def namespaces(self) -> Dict[str, str]:
        """Current namespaces with their absolute directories."""
        return namespace_dirs(self._namespace_table(), self._basedir)

    def alias_types(self) -> List[str]:
        """Current alias types in table order."""
        return list(self._alias_table())

    def aliases(self) -> Dict[str, Dict[str, str]]:
        """Snapshot of the current alias table."""
        return {t: dict(entries or {}) for t, entries in self._alias_table().items()}

    # ------------------------------ public API ----------------------------- #

    def absolute(
        self,
        path: str,
        from_: Optional[str] = None,
        aliases: AliasSpec = True,
        options: OptionsArg = None,
    ) -> Optional[str]:
        return self.resolve(path, from_, aliases, options)

    def relative(
        self,
        path: str,
        from_: Optional[str] = None,
        aliases: AliasSpec = True,
        options: OptionsArg = None,
    ) -> Optional[str]:
        """
        Resolve `path` and express it relative to the referencing location.

        The base is `from_` (or its directory when is_from_dir is false),
        falling back to basedir when there is no `from_`.
        """
        opts = ResolveOptions.coerce(options)
        if from_:
            base = from_ if opts.is_from_dir else dirname(from_)
        else:
            base = self._basedir
        return self._relative(path, from_, aliases, opts, base)

    def relative_to_basedir(
        self,
        path: str,
        from_: Optional[str] = None,
        aliases: AliasSpec = True,
        options: OptionsArg = None,
    ) -> Optional[str]:
        """Resolve `path` and express it relative to basedir."""
        opts = ResolveOptions.coerce(options)
        return self._relative(path, from_, aliases, opts, self._basedir)

    def resolve(
        self,
        path: str,
        from_: Optional[str] = None,
        aliases: AliasSpec = True,
        options: OptionsArg = None,
    ) -> Optional[str]:
        """
        Resolve a template reference.

        Args:
            path: Reference as written in the template
            from_: Referencing template (file or directory, see is_from_dir)
            aliases: False to skip aliasing, True/None for every alias type,
                     a type name, or a sequence of type names tried in order
            options: ResolveOptions or a mapping of its fields

        Returns:
            Resolved path, or None when the reference stays unresolved
        """
        opts = ResolveOptions.coerce(options)

        if is_dot_path(path):
            resolved = self._resolve_dot_path(path, from_, opts.is_from_dir)
        else:
            resolved = self._resolve_non_dot_path(path, from_)

        if resolved is None:
            return None

        if aliases is False:
            return resolved

        if opts.aliases is None:
            opts = opts.with_aliases(self._alias_table())

        for alias_type in alias_types_of(aliases):
            aliased = self.resolve_alias(resolved, alias_type, opts)
            if aliased is not None:
                return aliased

        return resolved

    def resolve_alias(
        self,
        path: str,
        alias_type: Optional[str] = None,
        options: OptionsArg = None,
    ) -> Optional[str]:
        """
        Substitute an already resolved path through the alias table.

        Returns None when no alias of the requested type applies.
        """
        opts = ResolveOptions.coerce(options)
        table = opts.aliases if opts.aliases is not None else self._alias_table()
        return resolve_alias(path, alias_type, table, self._basedir, recursive=opts.recursive)

    # ------------------------------- internals ----------------------------- #

    def _relative(
        self,
        path: str,
        from_: Optional[str],
        aliases: AliasSpec,
        opts: ResolveOptions,
        base: str,
    ) -> Optional[str]:
        absolute = self.resolve(path, from_, aliases, opts)
        if absolute is None:
            return None

        rel = relative_path(resolve_path(self._basedir, base), absolute)

        if opts.prepend_dot and not rel.startswith("."):
            return "./" + rel
        return rel

    def _resolve_dot_path(self, path: str, from_: Optional[str], is_from_dir: bool) -> Optional[str]:
        if from_ is None or from_ == "":
            return resolve_path(path)
        if is_from_dir:
            return resolve_path(self._basedir, from_, path)
        return resolve_path(self._basedir, dirname(from_), path)

    def _resolve_non_dot_path(self, path: str, from_: Optional[str]) -> Optional[str]:
        if NS_DELIMITER in path:
            expanded = resolve_namespace(path, from_, self._namespace_table(), self._basedir)
            return resolve_path(self._basedir, expanded)
        # Bare references are left for the caller to look up
        logger.debug(f"Passing through non-relative reference '{path}'")
        return path


__all__ = ["PathResolver"]
