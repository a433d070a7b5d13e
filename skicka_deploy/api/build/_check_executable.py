"""Verify that a path is an executable file."""

import os
from pathlib import Path

from .BuildError import BuildError


def _check_executable(path: Path) -> Path:
    if not path.is_file():
        raise BuildError(f"Executable not found at {path}")
    if not os.access(path, os.X_OK):
        raise BuildError(f"{path} is not executable")
    return path
