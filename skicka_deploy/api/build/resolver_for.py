"""Pick the artifact resolver for a configuration."""

from typing import TYPE_CHECKING

from .ArtifactResolver import ArtifactResolver
from .CargoArtifact import CargoArtifact
from .PathArtifact import PathArtifact
from .Toolchain import Toolchain

if TYPE_CHECKING:
    from ..config.SkickaDeployConfig import SkickaDeployConfig


def resolver_for(config: "SkickaDeployConfig") -> ArtifactResolver:
    """Return a PathArtifact when ``service.package`` is set, else build from the ``build`` section."""
    if config.service.package is not None:
        return PathArtifact(config.service.package)

    build = config.build
    toolchain = Toolchain.from_file(build.toolchain_path(), sha256=build.toolchain_sha256)
    return CargoArtifact(
        source_dir=build.source_path(),
        toolchain=toolchain,
        binary_name=build.binary_name,
        release=build.release,
    )
