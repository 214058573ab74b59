"""Custom Click paramtypes with shell completion support."""

import socket
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from ..models.intent import is_device_name


if TYPE_CHECKING:
    from click.shell_completion import CompletionItem


class DeviceType(click.ParamType):
    name = "device"

    def shell_complete(self, ctx: click.Context, param: click.Parameter, incomplete: str) -> list["CompletionItem"]:
        """Provide shell completion for local interface names."""

        try:
            names = sorted(name for _, name in socket.if_nameindex())
        except OSError:
            return []
        return [click.shell_completion.CompletionItem(name) for name in names if name.startswith(incomplete)]

    def convert(self, value: str, param: click.Parameter | None, ctx: click.Context | None) -> str:
        if not is_device_name(value):
            self.fail(f"Invalid device name: {value!r}", param, ctx)
        return value


class SettingsFileType(click.Path):
    """Existing YAML file; completion is left to the shell's file completion."""

    name = "settings_file"

    def __init__(self) -> None:
        super().__init__(exists=True, dir_okay=False, readable=True)

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        path = str(super().convert(value, param, ctx))
        if Path(path).suffix.lower() not in (".yaml", ".yml"):
            self.fail(f"Settings file must be a YAML file (.yaml or .yml): {value}", param, ctx)
        return path
