"""antimac controllers."""

from .interface import InterfaceController
from .mac import MacController


__all__ = [
    "InterfaceController",
    "MacController",
]
