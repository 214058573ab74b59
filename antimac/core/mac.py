"""MAC address generation and validation utilities."""

import os
import random
import time
from collections.abc import Iterable


MAC_LENGTH = 17
_SEPARATOR_POSITIONS = frozenset({2, 5, 8, 11, 14})
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _set_locally_administered(mac_bytes: bytearray) -> None:
    """Set the locally administered bit and unset the multicast bit."""

    mac_bytes[0] &= 0xFE  # Unset multicast bit
    mac_bytes[0] |= 0x02  # Set locally administered bit


def format_mac(octets: Iterable[int]) -> str:
    """Render six octets as a lowercase colon-separated MAC address."""

    values = list(octets)
    if len(values) != 6:
        raise ValueError(f"MAC address needs 6 octets, got {len(values)}")
    if any(not 0 <= b <= 0xFF for b in values):
        raise ValueError(f"MAC octets must be in range 0..255: {values}")
    return ":".join(f"{b:02x}" for b in values)


def generate_mac(seed: int | None = None) -> str:
    """Generate a random locally administered unicast MAC address.

    Without an explicit seed the generator is seeded from the current time
    combined with the process id. The result only has to differ from the
    burned-in address, it is not meant to be unpredictable.
    """

    if seed is None:
        seed = int(time.time()) ^ os.getpid()
    rng = random.Random(seed)  # noqa: S311
    mac_bytes = bytearray(rng.getrandbits(8) for _ in range(6))

    _set_locally_administered(mac_bytes)

    return format_mac(mac_bytes)


def is_valid_mac(mac: str | None) -> bool:
    """Check for the exact ``xx:xx:xx:xx:xx:xx`` shape, hex digits in any case."""

    if not mac or len(mac) != MAC_LENGTH:
        return False
    for i, ch in enumerate(mac):
        if i in _SEPARATOR_POSITIONS:
            if ch != ":":
                return False
        elif ch not in _HEX_DIGITS:
            return False
    return True


def _first_octet(mac: str) -> int:
    if not is_valid_mac(mac):
        raise ValueError(f"Invalid MAC address: {mac!r}")
    return int(mac[:2], 16)


def is_multicast(mac: str) -> bool:
    return bool(_first_octet(mac) & 0x01)
