from __future__ import annotations

import io

import pytest
from rich.console import Console


class ScriptedConsole:
    """Feeds canned answers through a stream and captures everything the console prints.

    Answers are not echoed, so each prompt is immediately followed by whatever
    is printed next.
    """

    def __init__(self, answers):
        self.stream = io.StringIO("".join(f"{a}\n" for a in answers))
        self._out = io.StringIO()
        self.console = Console(file=self._out, width=200, color_system=None)

    @property
    def text(self) -> str:
        return self._out.getvalue()

    @property
    def remaining(self) -> int:
        return len(self.stream.getvalue()[self.stream.tell():].splitlines())


@pytest.fixture
def scripted_console():
    return ScriptedConsole
