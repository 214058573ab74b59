from enum import Enum

from pydantic import BaseModel


ARM_ARCH = "arm64"


class InterfaceType(Enum):
    WIFI = "Wi-Fi"
    ETHERNET = "Ethernet"
    UNKNOWN = "Unknown"


class Strategy(Enum):
    """Command sequence used to apply a MAC, chosen by CPU and interface type."""

    ARM_WIFI = "arm-wifi"
    ARM_OTHER = "arm-other"
    INTEL_WIFI = "intel-wifi"
    INTEL_OTHER = "intel-other"

    @classmethod
    def resolve(cls, arch: str, iface_type: InterfaceType) -> "Strategy":
        wifi = iface_type is InterfaceType.WIFI
        if arch.strip() == ARM_ARCH:
            return cls.ARM_WIFI if wifi else cls.ARM_OTHER
        return cls.INTEL_WIFI if wifi else cls.INTEL_OTHER


class ApplyResult(BaseModel):
    device: str
    requested: str
    strategy: Strategy
    commands_ok: bool
    actual: str = ""

    @property
    def verified(self) -> bool:
        """Read-back MAC matches the request; this, not exit codes, decides success."""

        return bool(self.actual) and self.actual.lower() == self.requested.lower()
