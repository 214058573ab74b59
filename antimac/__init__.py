"""antimac - MAC address manager for macOS network interfaces."""

__version__ = "0.0.1"

from .core.application import Application
from .core.controller import BaseController


__all__ = [
    "__version__",
    "Application",
    "BaseController",
]
