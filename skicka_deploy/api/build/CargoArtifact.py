"""Artifact reference built from source with cargo and a pinned toolchain."""

import logging
import shutil
import subprocess
from pathlib import Path

from .ArtifactResolver import ArtifactResolver
from .BuildError import BuildError
from .Toolchain import Toolchain
from ._check_executable import _check_executable

logger = logging.getLogger(__name__)


class CargoArtifact(ArtifactResolver):
    """Build ``binary_name`` from ``source_dir`` with ``cargo +<channel>``.

    This is the whole build interface the service needs:
    build(source_tree, toolchain) -> executable path.
    """

    kind = "cargo"

    def __init__(self, source_dir: Path, toolchain: Toolchain, binary_name: str = "skicka", release: bool = True):
        self.source_dir = source_dir
        self.toolchain = toolchain
        self.binary_name = binary_name
        self.release = release

    @property
    def profile_dir(self) -> str:
        return "release" if self.release else "debug"

    def build_command(self, cargo_path: str = "cargo") -> list[str]:
        cmd = [cargo_path, f"+{self.toolchain.channel}", "build", "--bin", self.binary_name]
        if self.release:
            cmd.append("--release")
        return cmd

    def resolve(self) -> Path:
        if not (self.source_dir / "Cargo.toml").is_file():
            raise BuildError(f"No Cargo.toml in source tree {self.source_dir}")

        cargo_path = shutil.which("cargo")
        if not cargo_path:
            raise BuildError("cargo command not found in PATH. Install a Rust toolchain manager first.")

        cmd = self.build_command(cargo_path)
        logger.info("Building %s with toolchain %s: %s", self.binary_name, self.toolchain.channel, " ".join(cmd))
        result = subprocess.run(
            cmd,
            cwd=str(self.source_dir),
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.error("Build of %s failed with exit code %d", self.binary_name, result.returncode)
            raise BuildError(result.stderr.strip() or f"cargo build exited with status {result.returncode}")

        return _check_executable(self.source_dir / "target" / self.profile_dir / self.binary_name)

    def __repr__(self) -> str:
        return f"CargoArtifact({str(self.source_dir)!r}, channel={self.toolchain.channel!r})"
