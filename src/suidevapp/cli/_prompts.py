"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from suidevapp.cli._display import SUI_BLUE, SUI_GREEN, SUI_TEAL
from suidevapp.cli._errors import UserCancelled
from suidevapp.cli._registry import TemplateRegistry
from suidevapp.cli._types import Framework, Language, ProjectRequest

_console = Console()

T = TypeVar("T")

_PROJECT_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class Answered(Generic[T]):
    value: T


@dataclass(frozen=True)
class Cancelled:
    """The user pressed Ctrl-C / Esc or closed stdin."""


Answer: TypeAlias = "Answered[T] | Cancelled"


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _text(question: str, placeholder: str, validate: Callable[[str], str | None]) -> Answer[str]:
    """Free-text prompt that re-asks until *validate* returns ``None``."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()
    printed = 2

    while True:
        _console.print(f"[dim]│[/]  [dim]({placeholder})[/] ", end="")
        try:
            value = input()
        except (KeyboardInterrupt, EOFError):
            _console.print()
            return Cancelled()
        printed += 1

        error = validate(value)
        if error is None:
            break
        _console.print(f"[yellow]▲[/]  [yellow]{error}[/]")
        printed += 1

    _clear_lines(printed)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  [dim]{value}[/]")
    _print_bar()

    return Answered(value)


def _select(question: str, options: list[T], labels: list[str], hints: list[str]) -> Answer[T]:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        [f"{lbl} ({hint})" for lbl, hint in zip(labels, hints, strict=True)],
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    try:
        raw_index = menu.show()
    except KeyboardInterrupt:
        raw_index = None

    if raw_index is None:
        return Cancelled()

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl} [dim]({hints[i]})[/]")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return Answered(selected)


def _confirm(question: str, default: bool = True) -> Answer[bool]:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    try:
        answer = input(suffix).strip().lower()
    except (KeyboardInterrupt, EOFError):
        _console.print()
        return Cancelled()

    result = default if answer == "" else answer in ("y", "yes")

    display = "Yes" if result else "No"

    # Overwrite the ◆ question + │ bar + │ [Y/n] input line
    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return Answered(result)


def _unwrap(answer: Answer[T]) -> T:
    if isinstance(answer, Cancelled):
        raise UserCancelled()
    return answer.value


def validate_project_name(value: str) -> str | None:
    """Return an error message for an unusable project name, ``None`` if it is fine."""
    if len(value) == 0:
        return "Project name is required!"
    if not _PROJECT_NAME_RE.fullmatch(value):
        return "Project name can only contain letters, numbers, hyphens, and underscores"
    return None


def prompt_project_name() -> Answer[str]:
    return _text(
        f"[{SUI_BLUE}]🌊 What is your project name?[/]",
        placeholder="my-sui-app",
        validate=validate_project_name,
    )


def prompt_framework(registry: TemplateRegistry) -> Answer[Framework]:
    """Prompt for the framework; option icons come from the TypeScript templates."""
    frameworks = list(Framework)
    labels = [f"{registry.resolve(f, Language.TYPESCRIPT).icon} {f.label}" for f in frameworks]
    hints = [f.hint for f in frameworks]
    return _select(f"[{SUI_TEAL}]🚀 Select a framework:[/]", frameworks, labels, hints)


def prompt_language() -> Answer[Language]:
    languages = list(Language)
    labels = [lang.label for lang in languages]
    hints = [lang.hint for lang in languages]
    return _select(f"[{SUI_GREEN}]💎 Select a language:[/]", languages, labels, hints)


def prompt_confirm(question: str, default: bool = True) -> Answer[bool]:
    return _confirm(question, default=default)


def collect_project_request(registry: TemplateRegistry) -> ProjectRequest:
    """Ask for name, framework and language.

    Raises:
        UserCancelled: As soon as any of the three prompts is cancelled.
    """
    project_name = _unwrap(prompt_project_name())
    framework = _unwrap(prompt_framework(registry))
    language = _unwrap(prompt_language())
    return ProjectRequest(project_name=project_name, framework=framework, language=language)


def confirm_creation(request: ProjectRequest, registry: TemplateRegistry) -> None:
    """Ask the user to approve the resolved template; "no" counts as a cancellation."""
    descriptor = registry.lookup(request.template_key)
    question = (
        f"Create [{SUI_BLUE}]{request.project_name}[/] with [{SUI_TEAL}]{descriptor.name}[/]?"
    )
    if not _unwrap(prompt_confirm(question)):
        raise UserCancelled()


def confirm_install() -> bool:
    return _unwrap(prompt_confirm(f"[{SUI_TEAL}]📦 Do you want to install dependencies now?[/]"))
