"""User-facing errors, rendered by click with a fixed exit code."""

import click


class UsageError(click.UsageError):
    """Malformed or missing command line arguments."""

    exit_code = 1

    def __init__(self, message: str, ctx: click.Context | None = None) -> None:
        super().__init__(message, ctx or click.get_current_context(silent=True))


class AntimacError(click.ClickException):
    """Base class for failures detected before any interface is modified."""

    exit_code = 1


class DeviceDownError(AntimacError):
    def __init__(self, device: str) -> None:
        super().__init__(f"Device {device} is down.")
        self.device = device


class InvalidMacSyntaxError(AntimacError):
    def __init__(self, mac: str) -> None:
        super().__init__("Mac address is not valid.")
        self.mac = mac
