"""Pytest fixtures for tests."""

from collections.abc import Sequence

import pytest

from chorder.core.dispatcher import SpawnResult
from chorder.exceptions import SpawnError
from chorder.models import ChorderConfig


class FakeSpawner:
    """Records spawned commands instead of starting processes."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.commands: list[list[str]] = []

    def spawn(self, command: Sequence[str]) -> SpawnResult:
        argv = list(command)
        self.commands.append(argv)
        if self.fail:
            return SpawnResult(command=argv, error=SpawnError(argv, "No such file or directory"))
        return SpawnResult(command=argv)


class RecordingRenderer:
    """SlotRenderer that keeps the last state of every slot."""

    def __init__(self):
        self.layout: tuple | None = None
        self.slots: dict[int, tuple[bool, str, str]] = {}
        self.pages: list[str] = []

    def render_layout(self, rows, cols, geometry):
        self.layout = (rows, cols, geometry)

    def set_slot(self, index, visible, shortcut_text, description_text):
        self.slots[index] = (visible, shortcut_text, description_text)

    def notify_page_changed(self, new_page):
        self.pages.append(new_page)

    def visible(self) -> dict[int, tuple[str, str]]:
        return {
            index: (shortcut, description)
            for index, (visible, shortcut, description) in self.slots.items()
            if visible
        }


@pytest.fixture
def spawner():
    return FakeSpawner()


@pytest.fixture
def failing_spawner():
    return FakeSpawner(fail=True)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def launcher_config():
    """A two-page configuration covering every action kind."""
    return ChorderConfig(
        max_rows=2,
        max_columns=3,
        shell="/bin/sh",
        options={
            "main": [
                {"shortcut": "c-a", "description": "Echo", "run": "echo", "args": ["hi"]},
                {"shortcut": "m-1", "description": "Second page", "switch": "second"},
                {"shortcut": "b", "description": "Backup", "script": "$HOME/bin/backup.sh"},
                {"shortcut": "x", "run": "hidden-but-bound"},
                {"shortcut": "n", "description": "Nothing"},
            ],
            "second": [
                {"shortcut": "m-1", "description": "Back", "switch": "main"},
                {"shortcut": "z", "description": "Zsh script", "script": "/tmp/z.sh", "shell": "zsh"},
            ],
        },
    )
