"""Artifact reference to a pre-built executable."""

from pathlib import Path

from .ArtifactResolver import ArtifactResolver
from ._check_executable import _check_executable


class PathArtifact(ArtifactResolver):
    """A skicka binary that already exists on disk."""

    kind = "path"

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def resolve(self) -> Path:
        return _check_executable(self.path.resolve())

    def __repr__(self) -> str:
        return f"PathArtifact({str(self.path)!r})"
