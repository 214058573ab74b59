import pytest

from antimac.core.application import Application
from antimac.models.settings import Settings


class FakeRunner:
    """Stand-in for CommandRunner answering from substring-keyed tables.

    ``lines`` maps a substring of the command line to its first output line.
    ``statuses`` maps a substring to a list of exit codes consumed in order;
    the last code repeats once the list is exhausted. Unmatched commands
    print nothing and exit 0.
    """

    def __init__(self, lines=None, statuses=None):
        self.lines = dict(lines or {})
        self.statuses = {key: list(codes) for key, codes in (statuses or {}).items()}
        self.commands: list[str] = []
        self.debug = False

    def first_line(self, cmdline: str) -> str:
        self.commands.append(cmdline)
        for key, line in self.lines.items():
            if key in cmdline:
                return line
        return ""

    def status(self, cmdline: str) -> int:
        self.commands.append(cmdline)
        for key, codes in self.statuses.items():
            if key in cmdline:
                return codes.pop(0) if len(codes) > 1 else codes[0]
        return 0

    def mutating(self) -> list[str]:
        return [cmd for cmd in self.commands if " ether " in cmd or "-setairportpower" in cmd or "-z" in cmd]


@pytest.fixture
def app():
    Application.reset()
    application = Application.current()
    application.settings = Settings(settle_delay=0, airport_delay=0)
    yield application
    Application.reset()


@pytest.fixture
def make_runner(app):
    def _make(**kwargs) -> FakeRunner:
        runner = FakeRunner(**kwargs)
        app.runner = runner
        return runner

    return _make
