"""Compile a full configuration into a service descriptor."""

from typing import TYPE_CHECKING

from ..build.resolver_for import resolver_for
from .emit_descriptor import emit_descriptor
from .ServiceDescriptor import ServiceDescriptor

if TYPE_CHECKING:
    from ..config.SkickaDeployConfig import SkickaDeployConfig


def compile_service(config: "SkickaDeployConfig") -> ServiceDescriptor | None:
    """Return the descriptor for ``config``, or None when the service is disabled.

    The artifact resolver is only built for an enabled service, so a disabled service
    never touches the toolchain file or the build system.
    """
    if not config.service.enable:
        return None
    return emit_descriptor(config.service, config.systemd, resolver_for(config))
