"""
Loading resolver configuration from YAML.

    basedir: templates            # relative to the config file's directory
    namespaces:
      pages: true                 # -> <basedir>/pages
      mails: mail/templates
    aliases:
      theme:
        pages/header: themes/dark/header
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigLoadError
from .resolver import PathResolver
from .types import USE_NAMESPACE_NAME, ResolverConfig

logger = logging.getLogger(__name__)

DEFAULT_CFG_FILE = "tpath.yaml"

_ALLOWED_KEYS = {"basedir", "namespaces", "aliases"}

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> Dict[str, Any]:
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"invalid YAML: {e}", source=str(path)) from e
    if not isinstance(raw, dict):
        raise ConfigLoadError("YAML must be a mapping", source=str(path))
    return raw


def _check_namespaces(raw: Any, source: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigLoadError(f"expected mapping, got {type(raw).__name__}", ("namespaces",), source)
    out: Dict[str, Any] = {}
    for name, target in raw.items():
        if target is not USE_NAMESPACE_NAME and not isinstance(target, str):
            raise ConfigLoadError(
                f"expected true or a path string, got {target!r}", ("namespaces", str(name)), source
            )
        out[str(name)] = target
    return out


def _check_aliases(raw: Any, source: str) -> Dict[str, Dict[str, str]]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigLoadError(f"expected mapping, got {type(raw).__name__}", ("aliases",), source)
    out: Dict[str, Dict[str, str]] = {}
    for alias_type, entries in raw.items():
        if entries is None:
            out[str(alias_type)] = {}
            continue
        if not isinstance(entries, Mapping):
            raise ConfigLoadError(
                f"expected mapping, got {type(entries).__name__}", ("aliases", str(alias_type)), source
            )
        bucket: Dict[str, str] = {}
        for key, value in entries.items():
            if not isinstance(value, str):
                raise ConfigLoadError(
                    f"expected path string, got {value!r}", ("aliases", str(alias_type), str(key)), source
                )
            bucket[str(key)] = value
        out[str(alias_type)] = bucket
    return out


def config_from_dict(raw: Mapping[str, Any], root: Path, source: str = "<dict>") -> ResolverConfig:
    """
    Build a ResolverConfig from a parsed mapping.

    A relative basedir is taken relative to `root`.
    """
    extras = set(raw.keys()) - _ALLOWED_KEYS
    if extras:
        raise ConfigLoadError(f"unexpected keys: {sorted(extras)!r}", source=source)

    basedir = raw.get("basedir")
    if basedir is None:
        base = root
    elif isinstance(basedir, str):
        base = root / basedir
    else:
        raise ConfigLoadError(f"expected path string, got {basedir!r}", ("basedir",), source)

    return ResolverConfig(
        basedir=str(base.resolve()),
        namespaces=_check_namespaces(raw.get("namespaces"), source),
        aliases=_check_aliases(raw.get("aliases"), source),
    )


def load_config(path: Path) -> ResolverConfig:
    """
    Load resolver configuration from a YAML file.

    A missing file yields an empty configuration rooted at the file's directory.
    """
    root = path.parent.resolve()
    if not path.is_file():
        logger.debug(f"Config file not found, using defaults: {path}")
        return ResolverConfig(basedir=str(root))

    cfg = config_from_dict(_read_yaml_map(path), root, source=str(path))
    logger.info(
        f"Loaded {path}: basedir={cfg.basedir}, "
        f"{len(cfg.namespaces)} namespace(s), {len(cfg.aliases)} alias type(s)"
    )
    return cfg


def resolver_from_file(path: Path) -> PathResolver:
    return PathResolver(load_config(path))


__all__ = ["DEFAULT_CFG_FILE", "config_from_dict", "load_config", "resolver_from_file"]
