"""Linux service implementation - installs the skicka unit into systemd."""

import logging
import subprocess
import time
from contextlib import suppress
from typing import Any

from ..ServiceDescriptor import ServiceDescriptor
from ..SystemdConfig import SystemdConfig

logger = logging.getLogger(__name__)


class _Impl:
    """Drives systemctl for one unit, system-wide or for the current user."""

    def __init__(self, systemd: SystemdConfig):
        self.systemd = systemd

    def _systemctl(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        cmd = ["systemctl"]
        if self.systemd.user:
            cmd.append("--user")
        cmd.extend(args)
        return subprocess.run(cmd, check=check, capture_output=True, text=True)

    def install_service(self, descriptor: ServiceDescriptor) -> dict[str, Any]:
        """Write start script and unit file, reload systemd and enable the unit."""
        unit_path = self.systemd.unit_path()
        unit_path.parent.mkdir(parents=True, exist_ok=True)
        descriptor.script_path.parent.mkdir(parents=True, exist_ok=True)

        descriptor.script_path.write_text(descriptor.render_script(), encoding="utf-8")
        descriptor.script_path.chmod(0o755)
        unit_path.write_text(descriptor.render_unit(), encoding="utf-8")
        logger.info("Wrote %s and %s", unit_path, descriptor.script_path)

        try:
            self._systemctl("daemon-reload")
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"Failed to reload systemd daemon: {e.stderr}") from e

        try:
            self._systemctl("enable", self.systemd.unit_name)
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"Failed to enable service: {e.stderr}") from e

        return {
            "success": True,
            "unit_name": self.systemd.unit_name,
            "unit_path": str(unit_path),
            "script_path": str(descriptor.script_path),
        }

    def uninstall_service(self) -> dict[str, Any]:
        """Stop, disable and remove the unit together with its generated files."""
        unit_path = self.systemd.unit_path()

        with suppress(OSError):
            self._systemctl("stop", self.systemd.unit_name, check=False)
        with suppress(OSError):
            self._systemctl("disable", self.systemd.unit_name, check=False)

        for path in (unit_path, self.systemd.script_path(), self.systemd.motto_path()):
            if path.exists():
                path.unlink()
                logger.info("Removed %s", path)

        with suppress(OSError):
            self._systemctl("daemon-reload", check=False)

        return {
            "success": True,
            "unit_name": self.systemd.unit_name,
        }

    def get_service_status(self) -> dict[str, Any]:
        """Get unit status: installed, running and main PID."""
        unit_path = self.systemd.unit_path()

        status: dict[str, Any] = {
            "installed": unit_path.exists(),
            "unit_path": str(unit_path),
            "running": False,
            "pid": None,
        }

        if status["installed"]:
            result = self._systemctl("is-active", self.systemd.unit_name, check=False)
            status["running"] = result.returncode == 0

            if status["running"]:
                pid_result = self._systemctl(
                    "show", self.systemd.unit_name, "--property=MainPID", "--value", check=False
                )
                if pid_result.returncode == 0:
                    pid_str = pid_result.stdout.strip()
                    if pid_str and pid_str != "0":
                        with suppress(ValueError):
                            status["pid"] = int(pid_str)

        return status

    def start_service(self) -> dict[str, Any]:
        """Start the unit via systemctl."""
        unit_path = self.systemd.unit_path()

        if not unit_path.exists():
            return {
                "success": False,
                "error": f"Service unit file not found at {unit_path}. Install the service first.",
            }

        try:
            self._systemctl("start", self.systemd.unit_name)
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else "Unknown error"
            return {
                "success": False,
                "error": f"Failed to start service: {error_msg}",
            }

        time.sleep(0.5)  # Give skicka a moment to bind its listen address
        status = self.get_service_status()
        if status["running"]:
            return {
                "success": True,
                "unit_name": self.systemd.unit_name,
                "pid": status["pid"],
            }
        return {
            "success": False,
            "error": f"Service failed to start. Check 'journalctl -u {self.systemd.unit_name}'",
        }

    def stop_service(self) -> dict[str, Any]:
        """Stop the unit via systemctl."""
        try:
            self._systemctl("stop", self.systemd.unit_name)
            return {
                "success": True,
                "unit_name": self.systemd.unit_name,
            }
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else ""
            # Stopping a unit that is not loaded counts as success
            if "not loaded" in error_msg.lower() or "not found" in error_msg.lower():
                return {
                    "success": True,
                    "unit_name": self.systemd.unit_name,
                    "note": "Service was not running (already stopped).",
                }
            return {
                "success": False,
                "error": f"Failed to stop service: {error_msg}" if error_msg else "Failed to stop service.",
            }
