"""
Utilities for working with CLI in tests.
"""

import json
import os
import subprocess
import sys
from pathlib import Path


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Run tpath.cli with the given arguments in `root`.

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    return subprocess.run(
        [sys.executable, "-m", "tpath.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)
