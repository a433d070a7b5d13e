"""Abstract capability handle for a built executable."""

from abc import ABC, abstractmethod
from pathlib import Path


class ArtifactResolver(ABC):
    """Resolves an artifact reference to an executable path.

    The service emitter only depends on this interface, so it can run without a
    build system present.
    """

    kind: str = ""

    @abstractmethod
    def resolve(self) -> Path:
        """Return the path of the executable.

        Raises:
            BuildError: If the artifact cannot be produced or is not executable
        """
        pass
