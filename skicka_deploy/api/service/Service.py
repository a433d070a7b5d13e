"""Service public API - installs and manages the skicka unit."""

import platform
from typing import Any

from ._linux._Impl import _Impl as _LinuxImpl
from .ServiceDescriptor import ServiceDescriptor
from .SystemdConfig import SystemdConfig

# Registry: add new service-manager backends here
_BACKEND_REGISTRY: dict[str, type[_LinuxImpl]] = {
    "linux": _LinuxImpl,
}


class Service:
    """Public API for service operations."""

    def __init__(self, systemd: SystemdConfig):
        self.systemd = systemd
        self._impl: _LinuxImpl | None = None

    @staticmethod
    def detect_os() -> str:
        """Detect the current operating system and check that a backend exists for it.

        Raises:
            RuntimeError: If there is no backend for this OS
        """
        system = platform.system().lower()
        if system not in _BACKEND_REGISTRY:
            raise RuntimeError(
                f"Unsupported operating system: {system} (supported: {list(_BACKEND_REGISTRY.keys())})"
            )
        return system

    def __enter__(self):
        impl_class = _BACKEND_REGISTRY[self.detect_os()]
        self._impl = impl_class(self.systemd)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _LinuxImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    def install_service(self, descriptor: ServiceDescriptor) -> dict[str, Any]:
        return self._require_impl().install_service(descriptor)

    def uninstall_service(self) -> dict[str, Any]:
        return self._require_impl().uninstall_service()

    def get_service_status(self) -> dict[str, Any]:
        return self._require_impl().get_service_status()

    def start_service(self) -> dict[str, Any]:
        return self._require_impl().start_service()

    def stop_service(self) -> dict[str, Any]:
        return self._require_impl().stop_service()
