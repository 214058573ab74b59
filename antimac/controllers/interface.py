"""Interface controller for reading interface state from OS utilities."""

import re
import shlex
from typing import TYPE_CHECKING

from ..core.controller import BaseController
from ..models.interface import InterfaceType


if TYPE_CHECKING:
    from ..core.application import Application  # noqa: F401


ETHER_MARKER = "ether "

# networksetup -listallhardwareports sections, checked in this order
_HARDWARE_PORT_SECTIONS = (InterfaceType.WIFI, InterfaceType.ETHERNET)


class InterfaceController(BaseController["Application"]):
    """Controller for read-only interface queries.

    Every query runs one shell pipeline and inspects only its first output
    line. An empty line (including a command that failed to launch) reads
    as "not found".
    """

    def is_down(self, device: str) -> bool:
        """Check whether ``device`` is listed by ``ifconfig -d``."""

        pattern = shlex.quote(f"^{re.escape(device)}:")
        return bool(self.runner.first_line(f"{self.settings.ifconfig} -d | grep -E {pattern}"))

    def interface_type(self, device: str) -> InterfaceType:
        """Classify ``device`` using the hardware port listing."""

        port_line = shlex.quote(f"Device: {device}")
        for iface_type in _HARDWARE_PORT_SECTIONS:
            section = shlex.quote(iface_type.value)
            cmd = f"{self.settings.networksetup} -listallhardwareports | grep -A1 {section} | grep -xF {port_line}"
            if self.runner.first_line(cmd):
                return iface_type
        return InterfaceType.UNKNOWN

    def current_mac(self, device: str) -> str:
        """Get the MAC currently configured on ``device``, or ``""``."""

        line = self.runner.first_line(f"{self.settings.ifconfig} {shlex.quote(device)} | grep ether")
        _, marker, rest = line.partition(ETHER_MARKER)
        if not marker:
            return ""
        return rest.strip()

    def cpu_arch(self) -> str:
        """Get the machine hardware name, e.g. ``arm64`` or ``x86_64``."""

        return self.runner.first_line(f"{self.settings.uname} -m").strip()
