"""Systemd placement of the skicka unit."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.get_home_dir import get_home_dir


class SystemdConfig(BaseModel):
    """Where and how the unit is installed."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    unit_name: str = Field(default="skicka.service", description="Systemd unit name (e.g., 'skicka.service')")
    description: str = Field(default="Send files between machines", description="Unit Description=")
    user: bool = Field(default=False, description="Install as a user unit and drive it with 'systemctl --user'")
    unit_dir: str | None = Field(default=None, description="Directory for the unit file; derived from 'user' if None")
    state_dir: str | None = Field(
        default=None, description="Directory for the start script and motto file; defaults to $SKICKA_DEPLOY_HOME/state"
    )

    @field_validator("unit_name")
    @classmethod
    def validate_unit_name(cls, v: str) -> str:
        if not v.endswith(".service"):
            raise ValueError(f"systemd.unit_name must end with '.service' (e.g., 'skicka.service'), got: {v!r}")
        stem = v[: -len(".service")]
        if not stem or not stem.replace("-", "").replace("_", "").isalnum():
            raise ValueError(
                f"systemd.unit_name must be a valid systemd unit name "
                f"(alphanumeric, hyphens, underscores), got: {v!r}"
            )
        return v

    def unit_dir_path(self) -> Path:
        if self.unit_dir is not None:
            return Path(self.unit_dir).expanduser()
        if self.user:
            return Path.home() / ".config" / "systemd" / "user"
        return Path("/etc/systemd/system")

    def unit_path(self) -> Path:
        return self.unit_dir_path() / self.unit_name

    def state_dir_path(self) -> Path:
        if self.state_dir is not None:
            return Path(self.state_dir).expanduser()
        return get_home_dir() / "state"

    def unit_stem(self) -> str:
        return self.unit_name[: -len(".service")]

    def script_path(self) -> Path:
        return self.state_dir_path() / f"{self.unit_stem()}-start.sh"

    def motto_path(self) -> Path:
        return self.state_dir_path() / f"{self.unit_stem()}-motto.txt"
