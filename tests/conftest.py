from __future__ import annotations

import json
import shutil
import subprocess
import sys
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from create_app.reporter import ProgressReporter  # noqa: E402

TEMPLATE_MANIFEST = {
    "name": "template-test",
    "version": "0.0.1",
    "private": True,
    "dependencies": {"react": "^18.2.0", "react-dom": "^18.2.0", "react-scripts": "5.0.1"},
    "scripts": {"start": "react-scripts start"},
}


class FakeCommands:
    """Stand-in for ``subprocess.run`` that emulates ``git clone`` and package managers."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Any]] = []
        self.options: list[dict[str, Any]] = []
        self.failures: dict[str, tuple[int, str]] = {}
        self.template_files: dict[str, str] = {
            "package.json": json.dumps(TEMPLATE_MANIFEST, indent=2),
            "src/index.js": "console.log('hello')\n",
        }

    def fail(self, program: str, returncode: int = 1, stderr: str = "") -> None:
        self.failures[program] = (returncode, stderr)

    def run(self, command, **kwargs):
        command = list(command)
        self.calls.append((command, kwargs.get("cwd")))
        self.options.append(kwargs)
        program = command[0]
        if program in self.failures:
            returncode, stderr = self.failures[program]
            raise subprocess.CalledProcessError(returncode, command, output="", stderr=stderr)
        if command[1:2] == ["clone"]:
            self._clone(Path(command[-1]))
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    def _clone(self, destination: Path) -> None:
        destination.mkdir(parents=True)
        (destination / ".git").mkdir()
        (destination / ".git" / "HEAD").write_text("ref: refs/heads/master\n", encoding="utf-8")
        for relative, content in self.template_files.items():
            path = destination / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

    @property
    def programs(self) -> list[str]:
        return [command[0] for command, _ in self.calls]

    def command_for(self, program: str) -> tuple[list[str], Any]:
        for command, cwd in self.calls:
            if command[0] == program:
                return command, cwd
        raise AssertionError(f"{program} was never run")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own overrides out of the tests."""

    monkeypatch.delenv("CREATE_APP_REPOSITORY", raising=False)
    monkeypatch.delenv("CREATE_APP_FETCH_MODE", raising=False)


@pytest.fixture()
def fake_commands(monkeypatch: pytest.MonkeyPatch) -> FakeCommands:
    commands = FakeCommands()
    monkeypatch.setattr(subprocess, "run", commands.run)
    return commands


@pytest.fixture()
def executables(monkeypatch: pytest.MonkeyPatch) -> set[str]:
    """Names resolvable on the fake ``PATH``; mutate the set to change it."""

    available = {"git", "yarn", "npm"}

    def which(name: str, *args: Any, **kwargs: Any) -> str | None:
        return f"/usr/bin/{name}" if name in available else None

    monkeypatch.setattr(shutil, "which", which)
    return available


@pytest.fixture()
def consoles() -> tuple[StringIO, StringIO]:
    return StringIO(), StringIO()


@pytest.fixture()
def reporter(consoles: tuple[StringIO, StringIO]) -> ProgressReporter:
    out, err = consoles
    return ProgressReporter(
        Console(file=out, highlight=False, soft_wrap=True, width=200),
        Console(file=err, highlight=False, soft_wrap=True, width=200),
    )
