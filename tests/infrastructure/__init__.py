"""
Shared test infrastructure for tpath.

Modules:
- file_utils: Utilities for creating files and spelling paths
- cli_utils: Running the CLI and parsing its JSON output
"""

from .file_utils import write, native
from .cli_utils import run_cli, jload

__all__ = ["write", "native", "run_cli", "jload"]
