"""Config API module."""

from .SkickaDeployConfig import SkickaDeployConfig

__all__ = ["SkickaDeployConfig"]
