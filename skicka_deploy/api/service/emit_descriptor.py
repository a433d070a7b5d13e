"""Compile service options into a service descriptor."""

import logging

from ..build.ArtifactResolver import ArtifactResolver
from .assemble_command import assemble_command
from .ServiceConfig import ServiceConfig
from .ServiceDescriptor import ServiceDescriptor
from .SystemdConfig import SystemdConfig
from .write_motto_file import write_motto_file

logger = logging.getLogger(__name__)


def emit_descriptor(
    config: ServiceConfig, systemd: SystemdConfig, resolver: ArtifactResolver
) -> ServiceDescriptor | None:
    """Resolve the artifact, write the motto file and wrap the command.

    Returns None when the service is not enabled; nothing is resolved or written then.

    Raises:
        BuildError: If the artifact does not resolve to an executable
    """
    if not config.enable:
        logger.info("Service %s is disabled, nothing to emit", systemd.unit_name)
        return None

    binary_path = resolver.resolve()

    motto_path = None
    if config.motto:
        motto_path = write_motto_file(config.motto, systemd.motto_path())
    elif systemd.motto_path().exists():
        systemd.motto_path().unlink()
        logger.info("Removed stale motto file %s", systemd.motto_path())

    command = assemble_command(config, binary_path, motto_path)
    logger.info("Emitting %s with flags %s", systemd.unit_name, command.flags())
    return ServiceDescriptor(
        unit_name=systemd.unit_name,
        description=systemd.description,
        command=command,
        script_path=systemd.script_path(),
        motto_path=motto_path,
    )
