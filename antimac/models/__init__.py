"""antimac models.

This package contains:
- intent: Parsed command line intent
- interface: Interface classification, apply strategies and results
- settings: Tool locations and timing, loadable from YAML
"""

from .intent import Intent, Invocation, is_device_name, parse_intent
from .interface import ApplyResult, InterfaceType, Strategy
from .settings import Settings, load_settings


__all__ = [
    # Intent
    "Intent",
    "Invocation",
    "is_device_name",
    "parse_intent",
    # Interface
    "ApplyResult",
    "InterfaceType",
    "Strategy",
    # Settings
    "Settings",
    "load_settings",
]
