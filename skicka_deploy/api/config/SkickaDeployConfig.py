"""Top-level skicka-deploy configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from ..build.BuildConfig import BuildConfig
from ..service.ServiceConfig import ServiceConfig
from ..service.SystemdConfig import SystemdConfig


class SkickaDeployConfig(BaseModel):
    """Top-level configuration: how to build skicka, how to run it, where systemd finds it."""

    model_config = ConfigDict(extra="forbid")

    build: BuildConfig = Field(default_factory=BuildConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    systemd: SystemdConfig = Field(default_factory=SystemdConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under SKICKA_DEPLOY_HOME."""
        return get_home_dir() / "config.json"

    @classmethod
    def from_dict(cls, raw: Any) -> "SkickaDeployConfig":
        """Validate a raw config dict.

        Raises:
            ValueError: On any type or structure mismatch, as a single 'field: message' line
        """
        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: expected an object, got {type(raw).__name__}")
        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @classmethod
    def load(cls) -> "SkickaDeployConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        return cls.from_dict(raw)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "build": self.build.model_dump(),
            "service": self.service.model_dump(),
            "systemd": self.systemd.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
