"""Shared fixtures: a recording command runner and a scripted prompter."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from node_starter.config import TemplatePreset, ToolCommands
from node_starter.provision import CommandResult, FolderOpener, Provisioner, StatusReporter


class RecordingRunner:
    """Records commands instead of running them.

    ``returncodes`` maps an argument prefix (e.g. ``("git", "clone")``) to the
    exit status reported for matching commands; everything else succeeds.
    """

    def __init__(self, returncodes: Optional[Dict[Tuple[str, ...], int]] = None):
        self.returncodes = returncodes or {}
        self.calls: List[Tuple[List[str], Optional[Path]]] = []
        self.removed: List[Path] = []

    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
        cmd = [str(a) for a in args]
        self.calls.append((cmd, cwd))
        for prefix, code in self.returncodes.items():
            if tuple(cmd[: len(prefix)]) == prefix:
                return CommandResult(args=cmd, returncode=code, stderr="boom")
        return CommandResult(args=cmd, returncode=0)

    def remove_tree(self, path: Path) -> None:
        self.removed.append(path)

    @property
    def commands(self) -> List[List[str]]:
        return [cmd for cmd, _ in self.calls]

    def ran(self, *prefix: str) -> bool:
        return any(tuple(cmd[: len(prefix)]) == prefix for cmd in self.commands)


class ScriptedPrompter:
    """Answers prompts from pre-recorded lists."""

    def __init__(self, texts: Sequence[str] = (), confirms: Sequence[bool] = ()):
        self.texts = list(texts)
        self.confirms = list(confirms)
        self.questions: List[str] = []

    def ask_text(self, message: str) -> str:
        self.questions.append(message)
        if not self.texts:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.texts.pop(0)

    def confirm(self, message: str, default: bool) -> bool:
        self.questions.append(message)
        if not self.confirms:
            raise AssertionError(f"Unexpected confirmation: {message}")
        return self.confirms.pop(0)


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def make_provisioner(tmp_path: Path):
    """Factory building a Provisioner rooted at tmp_path with test doubles."""

    def _make(
        runner: Optional[RecordingRunner] = None,
        prompter: Optional[ScriptedPrompter] = None,
        preset: Optional[TemplatePreset] = None,
        opener: FolderOpener = FolderOpener.POSIX,
    ) -> Provisioner:
        return Provisioner(
            preset=preset or TemplatePreset(),
            tools=ToolCommands(),
            runner=runner or RecordingRunner(),  # type: ignore[arg-type]
            prompter=prompter or ScriptedPrompter(),  # type: ignore[arg-type]
            reporter=StatusReporter(color=False),
            opener=opener,
            cwd=tmp_path,
        )

    return _make


@pytest.fixture
def make_runner():
    """Factory for RecordingRunner with chosen failing commands."""
    return RecordingRunner


@pytest.fixture
def make_prompter():
    """Factory for ScriptedPrompter with recorded answers."""
    return ScriptedPrompter
