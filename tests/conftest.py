"""Shared fixtures for the sui-dev-app test suite."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from suidevapp.cli._config import ScaffoldSettings
from suidevapp.cli._errors import ProcessFailedError
from suidevapp.cli._process import ProcessResult, StreamMode
from suidevapp.cli._registry import DEFAULT_REGISTRY, TemplateRegistry


@dataclass(frozen=True)
class Call:
    args: tuple[str, ...]
    cwd: Path | None
    streams: StreamMode


@dataclass
class FakeProcess:
    """Records commands instead of running them.

    ``git clone`` is simulated by writing a tiny template tree (including a
    ``.git`` directory) into the destination argument.
    """

    fail_on: str | None = None
    detail: str = "fatal: Remote branch main not found in upstream origin"
    calls: list[Call] = field(default_factory=list)

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        streams: StreamMode = StreamMode.CAPTURED,
    ) -> ProcessResult:
        command = tuple(args)
        self.calls.append(Call(command, cwd, streams))

        if command[:2] == ("git", "clone"):
            destination = Path(command[-1])
            destination.mkdir(parents=True, exist_ok=True)
            (destination / "README.md").write_text("# template\n")
            if self.fail_on == "git":
                raise ProcessFailedError(command, 128, self.detail)
            (destination / ".git" / "objects").mkdir(parents=True)
            (destination / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
            (destination / "package.json").write_text('{"name": "template"}\n')
        elif self.fail_on == command[0]:
            raise ProcessFailedError(command, 1, self.detail)

        return ProcessResult(args=command, returncode=0)


@pytest.fixture
def fake_process() -> FakeProcess:
    return FakeProcess()


@pytest.fixture
def settings() -> ScaffoldSettings:
    return ScaffoldSettings()


@pytest.fixture
def registry() -> TemplateRegistry:
    return DEFAULT_REGISTRY


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("SUI_DEV_APP_GIT_HOST", "SUI_DEV_APP_GIT", "SUI_DEV_APP_PACKAGE_MANAGER"):
        monkeypatch.delenv(var, raising=False)
