"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceRenderOutput(BaseOutputSchema):
    """Output schema for service render command.

    When the service is disabled, nothing is emitted and all text fields are empty.
    """

    enabled: bool = Field(..., description="Whether the service is enabled (descriptor emitted)")
    unit_name: str = Field(..., description="Systemd unit name")
    unit: str = Field(..., description="Rendered unit file, empty string if not emitted")
    script: str = Field(..., description="Rendered start script, empty string if not emitted")
    argv: list[str] = Field(..., description="Argument vector as the binary would receive it")


class ServiceInstallOutput(BaseOutputSchema):
    """Output schema for service install command."""

    message: str = Field(..., description="Human readable result")
    installed: bool = Field(..., description="Whether the unit was installed")
    unit_path: str = Field(..., description="Path of the written unit file, empty string if not written")


class ServiceUninstallOutput(BaseOutputSchema):
    """Output schema for service uninstall command."""

    message: str = Field(..., description="Human readable result")
    uninstalled: bool = Field(..., description="Whether the unit was removed")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""

    message: str = Field(..., description="Human readable result")
    running: bool = Field(..., description="Whether the unit is running after the start request")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""

    message: str = Field(..., description="Human readable result")
    stopped: bool = Field(..., description="Whether the unit is stopped")


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command."""

    unit_name: str = Field(..., description="Systemd unit name")
    unit_path: str = Field(..., description="Path where the unit file lives")
    installed: bool = Field(..., description="Whether the unit file exists")
    running: bool = Field(..., description="Whether systemd reports the unit active")
    pid: int = Field(..., description="Main PID if running, -1 otherwise")


register_output_schema("service", "render", ServiceRenderOutput)
register_output_schema("service", "install", ServiceInstallOutput)
register_output_schema("service", "uninstall", ServiceUninstallOutput)
register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
register_output_schema("service", "status", ServiceStatusOutput)
