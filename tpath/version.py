from __future__ import annotations

from importlib import metadata

_DISTRIBUTIONS = ("template-path-resolver", "tpath")


def tool_version() -> str:
    """
    Version of the installed template-path-resolver distribution.

    Shown by `tpath --version`; "0.0.0" when running from an uninstalled checkout.
    """
    for dist in _DISTRIBUTIONS:
        try:
            return metadata.version(dist)
        except metadata.PackageNotFoundError:
            continue
    return "0.0.0"


__all__ = ["tool_version"]
