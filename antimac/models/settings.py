from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


AIRPORT_PATH = "/System/Library/PrivateFrameworks/Apple80211.framework/Versions/Current/Resources/airport"

Seconds = Annotated[float, Field(ge=0)]


class Settings(BaseModel):
    """Tool locations and timing used when talking to the OS."""

    model_config = ConfigDict(extra="forbid")

    ifconfig: str = "/sbin/ifconfig"
    networksetup: str = "/usr/sbin/networksetup"
    airport: str = AIRPORT_PATH
    uname: str = "uname"
    use_sudo: bool = True

    # settling time for the Wi-Fi radio between ARM steps
    settle_delay: Seconds = 0.2
    # wait after the legacy airport disassociate on Intel
    airport_delay: Seconds = 2.0
    command_timeout: Annotated[float, Field(gt=0)] | None = None
    output_limit: Annotated[int, Field(ge=1)] = 256


def load_settings(path: str | Path | None) -> Settings:
    """Load YAML -> Settings (Pydantic); defaults when no path is given."""

    if path is None:
        return Settings()

    p = Path(path)
    try:
        data: Any = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as ye:
        raise SystemExit(f"[Settings Validation Error]\n{ye}") from ye
    if not isinstance(data, dict):
        raise SystemExit(f"[Settings Validation Error]\nTop level of {p} must be a mapping, got {type(data).__name__}")
    try:
        return Settings(**data)
    except ValidationError as ve:
        raise SystemExit(f"[Settings Validation Error]\n{ve}") from ve
