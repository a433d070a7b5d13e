"""Pinned compiler toolchain passed explicitly into the build step."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ...utils.file_checksum import file_checksum
from .BuildError import BuildError


class Toolchain(BaseModel):
    """A versioned toolchain reference.

    Mirrors the contents of a ``rust-toolchain`` / ``rust-toolchain.toml`` file. The
    object is immutable and is handed to the resolver that builds with it, so there is
    no process-wide "current toolchain".
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    channel: str = Field(..., min_length=1, description="Toolchain channel or version (e.g., '1.79.0', 'nightly-2024-05-01')")
    components: tuple[str, ...] = Field(default=(), description="Extra toolchain components")
    targets: tuple[str, ...] = Field(default=(), description="Extra compilation targets")
    profile: str | None = Field(default=None, description="rustup profile (e.g., 'minimal')")
    sha256: str | None = Field(default=None, description="SHA-256 of the toolchain file this was read from")

    @classmethod
    def from_file(cls, path: Path, sha256: str | None = None) -> "Toolchain":
        """Read a toolchain file.

        Both the legacy single-line format and the TOML ``[toolchain]`` table are accepted.

        Args:
            path: Path to the toolchain file
            sha256: Expected SHA-256 of the file; when given, a mismatch is a build failure

        Raises:
            BuildError: If the file is missing, malformed, or does not match ``sha256``
        """
        if not path.is_file():
            raise BuildError(f"Toolchain file not found at {path}")

        actual = file_checksum(path)
        if sha256 is not None and actual != sha256.lower():
            raise BuildError(f"Toolchain file hash mismatch for {path}: expected {sha256}, got {actual}")

        text = path.read_text(encoding="utf-8")
        try:
            table = tomllib.loads(text).get("toolchain")
        except tomllib.TOMLDecodeError:
            table = None

        if table is None:
            lines = [line.strip() for line in text.splitlines() if line.strip()]
            if len(lines) != 1:
                raise BuildError(f"Toolchain file {path} must name exactly one channel")
            return cls(channel=lines[0], sha256=actual)

        if not isinstance(table, dict) or "channel" not in table:
            raise BuildError(f"Toolchain file {path} has no [toolchain].channel")
        return cls(
            channel=table["channel"],
            components=tuple(table.get("components", ())),
            targets=tuple(table.get("targets", ())),
            profile=table.get("profile"),
            sha256=actual,
        )
