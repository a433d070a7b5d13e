"""Service module - compiles the skicka options into a systemd unit and installs it."""

from .assemble_command import assemble_command
from .CommandLine import CommandLine, FileContents
from .emit_descriptor import emit_descriptor
from .prepare_motto import prepare_motto
from .ServiceConfig import ServiceConfig
from .ServiceDescriptor import ServiceDescriptor
from .SystemdConfig import SystemdConfig
from .write_motto_file import write_motto_file

__all__ = [
    "CommandLine",
    "FileContents",
    "ServiceConfig",
    "ServiceDescriptor",
    "SystemdConfig",
    "assemble_command",
    "emit_descriptor",
    "prepare_motto",
    "write_motto_file",
]
