"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure the CLI reports to the user."""


class UserCancelled(ScaffoldError):
    """The user interrupted a prompt or declined to continue."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class DestinationExistsError(ScaffoldError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Directory "{path.name}" already exists!')


class UnknownTemplateKindError(ScaffoldError, KeyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown template {key!r}.")

    def __str__(self) -> str:
        return str(self.args[0])


class ProcessFailedError(ScaffoldError):
    """An external command could not be started or exited non-zero."""

    def __init__(self, command: Sequence[str], returncode: int | None, detail: str) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.detail = detail
        super().__init__(detail)


class TemplateFetchError(ScaffoldError):
    def __init__(self, template_key: str, detail: str) -> None:
        self.template_key = template_key
        self.detail = detail
        super().__init__(detail)
