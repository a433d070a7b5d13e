"""Build module - pinned toolchain and artifact resolution for the skicka binary."""

from .ArtifactResolver import ArtifactResolver
from .BuildConfig import BuildConfig
from .BuildError import BuildError
from .CargoArtifact import CargoArtifact
from .PathArtifact import PathArtifact
from .Toolchain import Toolchain

__all__ = [
    "ArtifactResolver",
    "BuildConfig",
    "BuildError",
    "CargoArtifact",
    "PathArtifact",
    "Toolchain",
]
