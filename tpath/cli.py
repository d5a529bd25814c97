from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

from .config import DEFAULT_CFG_FILE, resolver_from_file
from .errors import TPathUserError
from .report import AliasesList, NamespacesList, ResolveReport
from .resolver import PathResolver
from .types import AliasSpec, ResolveOptions
from .version import tool_version

_LOG = logging.getLogger("tpath")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("TPATH_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tpath",
        description="Template path resolver (namespaces, aliases, relative references)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            type=Path,
            default=Path(DEFAULT_CFG_FILE),
            help=f"resolver configuration (default: ./{DEFAULT_CFG_FILE})",
        )
        sp.add_argument("--verbose", action="store_true", help="debug logging to stderr")

    sp_resolve = sub.add_parser("resolve", help="resolve one reference (JSON)")
    add_common(sp_resolve)
    sp_resolve.add_argument("ref", help="./rel | ../rel | ns::path | ::path | anything else")
    sp_resolve.add_argument("--from", dest="from_", metavar="FROM", help="referencing template path")
    sp_resolve.add_argument(
        "--file",
        action="store_true",
        help="FROM names a file; its directory anchors relative references",
    )
    sp_resolve.add_argument(
        "--mode",
        choices=["absolute", "relative", "basedir"],
        default="absolute",
        help="absolute path, relative to FROM, or relative to basedir",
    )
    alias_group = sp_resolve.add_mutually_exclusive_group()
    alias_group.add_argument(
        "--alias",
        action="append",
        metavar="TYPE",
        help="alias type to apply (repeatable, tried in order; default: all)",
    )
    alias_group.add_argument("--no-alias", action="store_true", help="skip alias substitution")
    sp_resolve.add_argument("--no-recursive", action="store_true", help="apply at most one alias")
    sp_resolve.add_argument("--prepend-dot", action="store_true", help="prefix relative results with ./")

    sp_list = sub.add_parser("list", help="configured entities (JSON)")
    add_common(sp_list)
    sp_list.add_argument("what", choices=["namespaces", "aliases"], help="what to list")

    return p


def _alias_spec(ns: argparse.Namespace) -> AliasSpec:
    if ns.no_alias:
        return False
    if ns.alias:
        return list(ns.alias)
    return True


def _run_resolve(resolver: PathResolver, ns: argparse.Namespace) -> ResolveReport:
    opts = ResolveOptions(
        is_from_dir=not ns.file,
        prepend_dot=ns.prepend_dot,
        recursive=not ns.no_recursive,
    )
    aliases = _alias_spec(ns)

    if ns.mode == "relative":
        result = resolver.relative(ns.ref, ns.from_, aliases, opts)
    elif ns.mode == "basedir":
        result = resolver.relative_to_basedir(ns.ref, ns.from_, aliases, opts)
    else:
        result = resolver.absolute(ns.ref, ns.from_, aliases, opts)

    return ResolveReport(ref=ns.ref, from_=ns.from_, mode=ns.mode, basedir=resolver.basedir, result=result)


def _dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        resolver = resolver_from_file(ns.config)

        if ns.cmd == "resolve":
            report = _run_resolve(resolver, ns)
            sys.stdout.write(_dumps(report.model_dump(mode="json", by_alias=True)))
            return 0

        if ns.cmd == "list":
            if ns.what == "namespaces":
                data = NamespacesList(basedir=resolver.basedir, namespaces=resolver.namespaces())
            else:
                data = AliasesList(
                    basedir=resolver.basedir,
                    alias_types=resolver.alias_types(),
                    aliases=resolver.aliases(),
                )
            sys.stdout.write(_dumps(data.model_dump(mode="json", by_alias=True)))
            return 0

    except TPathUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
