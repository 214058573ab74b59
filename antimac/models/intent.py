from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict

from ..errors import UsageError


class Intent(Enum):
    SHOW_MAC = "show"
    SET_RANDOM_MAC = "random"
    SET_SPECIFIC_MAC = "config"
    SHOW_VERSION = "version"


class Invocation(BaseModel):
    """What the user asked for, derived once from the command line.

    Malformed command lines never produce an Invocation; they raise UsageError.
    """

    model_config = ConfigDict(frozen=True)

    intent: Intent
    device: str | None = None
    mac: str | None = None


def is_device_name(name: str | None) -> bool:
    """Reject names that cannot be an interface; existence is left to the OS."""

    return bool(name) and not name.startswith("-") and not any(ch.isspace() for ch in name)


def _device(name: str) -> str:
    if not is_device_name(name):
        raise UsageError(f"Invalid device name: {name!r}")
    return name


def parse_intent(
    show: str | None,
    config: str | None,
    args: Sequence[str],
    version: bool = False,
) -> Invocation:
    """Map parsed option values to an Invocation.

    ``version`` wins over everything else. Raises UsageError for every
    shape not listed in the usage text.
    """

    if version:
        return Invocation(intent=Intent.SHOW_VERSION)

    if show is not None and config is not None:
        raise UsageError("--show and --config cannot be used together.")

    if show is not None:
        if args:
            raise UsageError(f"Unexpected extra argument: {args[0]}")
        return Invocation(intent=Intent.SHOW_MAC, device=_device(show))

    if config is not None:
        if not args:
            raise UsageError("Missing new-mac-address argument.")
        if len(args) > 1:
            raise UsageError(f"Unexpected extra argument: {args[1]}")
        return Invocation(intent=Intent.SET_SPECIFIC_MAC, device=_device(config), mac=args[0])

    if not args:
        raise UsageError("Missing device argument.")
    if len(args) > 1:
        raise UsageError(f"Unexpected extra argument: {args[1]}")
    return Invocation(intent=Intent.SET_RANDOM_MAC, device=_device(args[0]))
