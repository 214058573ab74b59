"""Application singleton with dependency injection for controllers."""

from typing import Any, Self

from rich.console import Console

from ..controllers.interface import InterfaceController
from ..controllers.mac import MacController
from ..models.settings import Settings
from .runner import CommandRunner


class Application:
    """Main application."""

    _instance: Self | None = None

    def __init__(self) -> None:
        self._console = Console(soft_wrap=True)
        self._err_console = Console(stderr=True, soft_wrap=True)
        self._controllers: dict[str, Any] = {}

        self._settings: Settings = Settings()
        self._runner: CommandRunner | None = None
        self._debug: bool = False

    @classmethod
    def current(cls) -> Self:
        """Get current application instance."""

        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance."""

        cls._instance = None

    @property
    def console(self) -> Console:
        """Get rich console for displaying messages."""

        return self._console

    @property
    def err_console(self) -> Console:
        """Get rich console bound to stderr."""

        return self._err_console

    @property
    def settings(self) -> Settings:
        """Get the active settings."""

        return self._settings

    @settings.setter
    def settings(self, value: Settings) -> None:
        """Replace the settings; the runner is rebuilt on next use."""

        self._settings = value
        self._runner = None

    @property
    def debug(self) -> bool:
        """Get debug mode flag."""

        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        """Set debug mode flag."""

        self._debug = value
        if self._runner is not None:
            self._runner.debug = value

    @property
    def runner(self) -> CommandRunner:
        """Get the shell command runner."""

        if self._runner is None:
            self._runner = CommandRunner(self._settings, console=self._console, debug=self._debug)
        return self._runner

    @runner.setter
    def runner(self, value: CommandRunner) -> None:
        self._runner = value

    @property
    def interfaces(self) -> InterfaceController:
        """Get interface inspection controller."""

        if "interfaces" not in self._controllers:
            self._controllers["interfaces"] = InterfaceController(self)
        return self._controllers["interfaces"]

    @property
    def mac(self) -> MacController:
        """Get MAC change controller."""

        if "mac" not in self._controllers:
            self._controllers["mac"] = MacController(self)
        return self._controllers["mac"]
