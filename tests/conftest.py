from __future__ import annotations

from pathlib import Path

import pytest

from tpath import PathResolver, ResolveOptions


@pytest.fixture
def basedir(tmp_path: Path) -> str:
    """Absolute base directory (nothing is created inside it)."""
    return str(tmp_path.resolve())


@pytest.fixture
def resolver(basedir: str) -> PathResolver:
    """Resolver with namespace "a" named after itself and "b" pointing to b/subdir."""
    return PathResolver(
        basedir=basedir,
        namespaces={
            "a": True,
            "b": "b/subdir",
        },
    )


@pytest.fixture
def from_file() -> ResolveOptions:
    """Options treating `from_` as a file path."""
    return ResolveOptions(is_from_dir=False)
