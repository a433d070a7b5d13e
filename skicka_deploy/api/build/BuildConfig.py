"""Build section of the skicka-deploy configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class BuildConfig(BaseModel):
    """How to produce the default skicka artifact from source."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    source_dir: str = Field(default=".", description="Path to the skicka source tree")
    toolchain_file: str | None = Field(
        default=None, description="Toolchain file; defaults to <source_dir>/rust-toolchain"
    )
    toolchain_sha256: str | None = Field(default=None, description="Expected SHA-256 of the toolchain file")
    binary_name: str = Field(default="skicka", min_length=1, description="Cargo binary target to build")
    release: bool = Field(default=True, description="Build with --release")

    def source_path(self) -> Path:
        return Path(self.source_dir).expanduser().resolve()

    def toolchain_path(self) -> Path:
        if self.toolchain_file is not None:
            return Path(self.toolchain_file).expanduser().resolve()
        return self.source_path() / "rust-toolchain"
