"""MAC controller: validation, per-platform apply sequences and verification."""

import shlex
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.markup import escape

from ..core.controller import BaseController
from ..core.mac import generate_mac, is_multicast, is_valid_mac
from ..errors import DeviceDownError, InvalidMacSyntaxError
from ..models.intent import Intent, Invocation
from ..models.interface import ApplyResult, Strategy


if TYPE_CHECKING:
    from ..core.application import Application


AIRPORT_DEPRECATION_WARNING = (
    "WARNING: The airport command line tool is deprecated and will be removed in a future release.\n"
    "For diagnosing Wi-Fi related issues, use the Wireless Diagnostics app or wdutil command line tool."
)


class MacController(BaseController["Application"]):
    """Controller for changing an interface MAC address.

    The command sequence is picked once per call from ``Strategy`` and run
    strictly in order. Exit codes of the underlying commands are reported,
    but only the MAC read back afterwards decides success.
    """

    def __init__(self, app: "Application") -> None:
        super().__init__(app)
        self._sequences: dict[Strategy, Callable[[str, str], bool]] = {
            Strategy.ARM_WIFI: self._apply_arm_wifi,
            Strategy.ARM_OTHER: self._apply_direct,
            Strategy.INTEL_WIFI: self._apply_intel_wifi,
            Strategy.INTEL_OTHER: self._apply_direct,
        }

    # ---------- command helpers ----------

    def _privileged(self, cmd: str) -> str:
        return f"sudo {cmd}" if self.settings.use_sudo else cmd

    def _set_mac(self, device: str, mac: str) -> bool:
        cmd = f"{self.settings.ifconfig} {shlex.quote(device)} ether {shlex.quote(mac)} 2>/dev/null"
        return self.runner.status(self._privileged(cmd)) == 0

    def _airport_power(self, device: str, state: str) -> None:
        cmd = f"{self.settings.networksetup} -setairportpower {shlex.quote(device)} {state}"
        self.runner.status(self._privileged(cmd))

    def _detect_new_hardware(self) -> None:
        self.runner.status(self._privileged(f"{self.settings.networksetup} -detectnewhardware"))

    def _airport_disassociate(self, device: str) -> None:
        self.runner.status(self._privileged(f"{self.settings.airport} {shlex.quote(device)} -z"))

    # ---------- sequences ----------

    def _apply_arm_wifi(self, device: str, mac: str) -> bool:
        delay = self.settings.settle_delay

        self._airport_power(device, "off")
        time.sleep(delay)
        first = self._set_mac(device, mac)
        self._airport_power(device, "on")
        time.sleep(delay)
        # the first attempt usually fails while the radio is coming back up
        second = self._set_mac(device, mac)
        self._detect_new_hardware()
        time.sleep(delay)
        return first or second

    def _apply_intel_wifi(self, device: str, mac: str) -> bool:
        self.console.print(escape(AIRPORT_DEPRECATION_WARNING))
        self._airport_disassociate(device)
        time.sleep(self.settings.airport_delay)
        return self._set_mac(device, mac)

    def _apply_direct(self, device: str, mac: str) -> bool:
        return self._set_mac(device, mac)

    # ---------- public API ----------

    def resolve_strategy(self, device: str) -> Strategy:
        """Pick the apply sequence for ``device`` on this machine."""

        interfaces = self.app.interfaces
        return Strategy.resolve(interfaces.cpu_arch(), interfaces.interface_type(device))

    def apply(self, device: str, mac: str) -> ApplyResult:
        """Apply ``mac`` to ``device`` and read back the result."""

        strategy = self.resolve_strategy(device)
        commands_ok = self._sequences[strategy](device, mac)
        actual = self.app.interfaces.current_mac(device)

        return ApplyResult(
            device=device,
            requested=mac,
            strategy=strategy,
            commands_ok=commands_ok,
            actual=actual,
        )

    def change(self, invocation: Invocation) -> ApplyResult:
        """Validate a set-MAC invocation, then apply it.

        Nothing is modified unless the device is up and the MAC is well formed.
        """

        if invocation.intent not in (Intent.SET_RANDOM_MAC, Intent.SET_SPECIFIC_MAC):
            raise ValueError(f"Not a MAC change request: {invocation.intent}")

        device = invocation.device
        if self.app.interfaces.is_down(device):
            raise DeviceDownError(device)

        if invocation.intent is Intent.SET_SPECIFIC_MAC:
            mac = invocation.mac
            if not is_valid_mac(mac):
                raise InvalidMacSyntaxError(mac)
            if is_multicast(mac):
                self.app.err_console.print(
                    escape(f"Warning: {mac} is a multicast address and will likely be rejected."),
                )
        else:
            mac = generate_mac()

        return self.apply(device, mac)
