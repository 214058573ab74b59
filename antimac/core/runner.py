"""Shell command runner used for every OS utility invocation."""

import subprocess
from typing import TYPE_CHECKING

from rich.markup import escape


if TYPE_CHECKING:
    from rich.console import Console

    from ..models.settings import Settings


# Conventional shell statuses for "could not run" and "timed out".
STATUS_NOT_LAUNCHED = 127
STATUS_TIMED_OUT = 124


class CommandRunner:
    """Run command lines through the OS shell, one at a time.

    Calls block until the child exits. ``settings.command_timeout`` is
    ``None`` unless configured, so a hung utility blocks indefinitely.
    """

    def __init__(self, settings: "Settings", console: "Console | None" = None, debug: bool = False) -> None:
        self.settings = settings
        self.console = console
        self.debug = debug

    def _log(self, message: str) -> None:
        if self.debug and self.console is not None:
            self.console.log(escape(message))

    def first_line(self, cmdline: str) -> str:
        """Return the first stdout line of ``cmdline``, or ``""`` if there is none."""

        try:
            proc = subprocess.run(  # noqa: S602
                cmdline,
                shell=True,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.settings.command_timeout,
            )
        except subprocess.TimeoutExpired:
            self._log(f"$ {cmdline} -> timed out after {self.settings.command_timeout}s")
            return ""
        except OSError as e:
            self._log(f"$ {cmdline} -> failed to launch: {e}")
            return ""

        lines = proc.stdout.splitlines()
        line = lines[0][: self.settings.output_limit] if lines else ""
        self._log(f"$ {cmdline} -> {line!r}")
        return line

    def status(self, cmdline: str) -> int:
        """Run ``cmdline`` with inherited stdio and return its exit status."""

        try:
            proc = subprocess.run(  # noqa: S602
                cmdline,
                shell=True,
                check=False,
                timeout=self.settings.command_timeout,
            )
        except subprocess.TimeoutExpired:
            self._log(f"$ {cmdline} -> timed out after {self.settings.command_timeout}s")
            return STATUS_TIMED_OUT
        except OSError as e:
            self._log(f"$ {cmdline} -> failed to launch: {e}")
            return STATUS_NOT_LAUNCHED

        self._log(f"$ {cmdline} -> exit {proc.returncode}")
        return proc.returncode
