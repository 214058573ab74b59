"""antimac CLI."""

import sys

import click
import rich_click
from rich.markup import escape

from . import __version__
from .core.application import Application
from .core.paramtypes import DeviceType, SettingsFileType
from .models.intent import Intent, parse_intent
from .models.settings import load_settings


# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
rich_click.rich_click.USE_MARKDOWN = False
rich_click.rich_click.STYLE_ERRORS_SUGGESTION = "dim italic"
rich_click.rich_click.MAX_WIDTH = 100

VERSION_FLAGS = ("-v", "--version")

FAILURE_CAUSES = (
    "Insufficient privileges (try sudo)",
    "MAC address rejected by system",
    "Interface may not support spoofing",
    "The network stack is feeling stubborn today",
    "Or perhaps, fate resists your command",
)


def _print_version(ctx: click.Context) -> None:
    click.echo(f"Version: {__version__}")
    ctx.exit(0)


class AntimacCommand(rich_click.RichCommand):
    """Command whose argument errors exit with status 1 and never mask --version."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        version_requested = any(arg in VERSION_FLAGS for arg in args)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            if version_requested:
                _print_version(ctx)
            e.exit_code = 1
            raise


@click.command(
    cls=AntimacCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(*VERSION_FLAGS, "show_version", is_flag=True, help="Show version and exit.")
@click.option(
    "-s",
    "--show",
    "show_device",
    type=DeviceType(),
    default=None,
    help="Show the current MAC address of DEVICE.",
)
@click.option(
    "-c",
    "--config",
    "config_device",
    type=DeviceType(),
    default=None,
    help="Set the MAC address given as the argument on DEVICE.",
)
@click.option(
    "--settings",
    "settings_path",
    type=SettingsFileType(),
    default=None,
    envvar="ANTIMAC_SETTINGS",
    help="YAML file overriding tool paths, delays and timeouts.",
)
@click.option("--debug", is_flag=True, help="Print every shell command and its result.")
@click.argument("args", nargs=-1, metavar="[DEVICE | NEW-MAC-ADDRESS]")
@click.pass_context
def cli(
    ctx: click.Context,
    show_device: str | None,
    config_device: str | None,
    settings_path: str | None,
    show_version: bool,
    debug: bool,
    args: tuple[str, ...],
):
    """Manage the MAC address of a macOS network interface.

    \b
      antimac DEVICE                   set a random MAC on DEVICE
      antimac -s DEVICE                show the current MAC of DEVICE
      antimac -c DEVICE NEW-MAC        set NEW-MAC on DEVICE
      antimac -v                       show version

    Changing the MAC requires root privileges.
    """

    invocation = parse_intent(show_device, config_device, args, version=show_version)
    if invocation.intent is Intent.SHOW_VERSION:
        _print_version(ctx)

    app = Application.current()
    if settings_path:
        app.settings = load_settings(settings_path)
    app.debug = debug

    if invocation.intent is Intent.SHOW_MAC:
        mac = app.interfaces.current_mac(invocation.device)
        if not mac:
            app.console.print(escape(f"Could not get MAC address for {invocation.device}"))
            sys.exit(1)
        app.console.print(escape(f"[+] {invocation.device} MAC address: {mac}"))
        return

    result = app.mac.change(invocation)
    if debug:
        app.console.log(escape(f"strategy={result.strategy.value} commands_ok={result.commands_ok}"))

    if result.verified:
        app.console.print(escape(f"[+] MAC address successfully set for {result.device}: {result.actual}"))
        return

    app.console.print(escape(f"[!] Failed to set MAC address for {result.device}"))
    app.console.print(escape(f"[=] Current MAC remains: {result.actual}"))
    app.console.print()
    app.console.print(escape("[x] MAC operation failed. Possible causes:"))
    for cause in FAILURE_CAUSES:
        app.console.print(f"    • {escape(cause)}")
    sys.exit(1)
