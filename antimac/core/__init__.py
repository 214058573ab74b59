"""antimac core framework."""

from .application import Application
from .controller import BaseController
from .runner import CommandRunner


__all__ = [
    "Application",
    "BaseController",
    "CommandRunner",
]
