"""Systemd unit wrapping the skicka command line."""

from dataclasses import dataclass
from pathlib import Path

from ...templating import render_template
from .CommandLine import CommandLine

_UNIT_TEMPLATE = """[Unit]
Description={{ description }}
After={{ after }}

[Service]
ExecStart={{ script_path }}

[Install]
WantedBy={{ wanted_by }}
"""

_SCRIPT_TEMPLATE = """#!/bin/sh
set -e
{{ command }}
"""

_NEEDS_QUOTING = set(" \t\"'\\")


def _systemd_exec_path(path: Path) -> str:
    """Escape a path for ExecStart=: double '%' and '$', and double-quote it when it holds whitespace or quotes."""
    text = str(path).replace("%", "%%").replace("$", "$$")
    if not _NEEDS_QUOTING.intersection(text):
        return text
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


@dataclass(frozen=True)
class ServiceDescriptor:
    """Everything the service manager needs to run skicka.

    There is intentionally no Restart= or health check: if skicka exits, systemd's
    default (no restart) applies.
    """

    unit_name: str
    description: str
    command: CommandLine
    script_path: Path
    motto_path: Path | None = None
    wanted_by: str = "multi-user.target"
    after: str = "network.target"

    def render_script(self) -> str:
        return render_template(_SCRIPT_TEMPLATE, {"command": self.command.render_shell()})

    def render_unit(self) -> str:
        return render_template(
            _UNIT_TEMPLATE,
            {
                "description": self.description,
                "after": self.after,
                "script_path": _systemd_exec_path(self.script_path),
                "wanted_by": self.wanted_by,
            },
        )
