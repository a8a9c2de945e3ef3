"""Shared pytest fixtures."""

import os
import sys
from pathlib import Path

import pytest

from prompt_edit.core.agents.base_agent import BaseAgent
from prompt_edit.core.edit import PendingApplySlot

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

FAKE_AGENT = Path(__file__).parent / "fixtures" / "fake_agent.py"


class ScriptAgent(BaseAgent):
    """Runs tests/fixtures/fake_agent.py with the current interpreter."""

    def __init__(self, scenario: str = "hello", executable: str = sys.executable):
        self.scenario = scenario
        self._executable = executable

    @property
    def name(self) -> str:
        return f"fake/{self.scenario}"

    @property
    def executable(self) -> str:
        return self._executable

    def arguments(self) -> list[str]:
        return [str(FAKE_AGENT), self.scenario]


class RecordingSink:
    """LiveDisplaySink that records calls in order."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def prepare(self) -> None:
        self.events.append(("prepare", ""))

    def append(self, text: str) -> None:
        self.events.append(("append", text))

    @property
    def text(self) -> str:
        return "".join(text for kind, text in self.events if kind == "append")


@pytest.fixture
def script_agent():
    return ScriptAgent


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def slot():
    return PendingApplySlot()
