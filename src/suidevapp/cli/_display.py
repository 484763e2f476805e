"""Sui-themed banner, closing lines and the post-scaffold report."""

from __future__ import annotations

import time
from collections.abc import Sequence

from rich.color import Color, blend_rgb
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from suidevapp.cli._config import ScaffoldSettings
from suidevapp.cli._registry import TemplateDescriptor

_console = Console()

SUI_BLUE = "#4DA6FF"
SUI_TEAL = "#00D4AA"
SUI_GREEN = "#36D7B7"
SUI_GRADIENT: tuple[str, ...] = (SUI_BLUE, SUI_TEAL, SUI_GREEN)

BANNER = """
███████╗██╗   ██╗██╗   ██████╗ ███████╗██╗   ██╗    █████╗ ██████╗ ██████╗
██╔════╝██║   ██║██║   ██╔══██╗██╔════╝██║   ██║   ██╔══██╗██╔══██╗██╔══██╗
███████╗██║   ██║██║   ██║  ██║█████╗  ██║   ██║   ███████║██████╔╝██████╔╝
╚════██║██║   ██║██║   ██║  ██║██╔══╝  ╚██╗ ██╔╝   ██╔══██║██╔═══╝ ██╔═══╝
███████║╚██████╔╝██║   ██████╔╝███████╗ ╚████╔╝    ██║  ██║██║     ██║
╚══════╝ ╚═════╝ ╚═╝   ╚═════╝ ╚══════╝  ╚═══╝     ╚═╝  ╚═╝╚═╝     ╚═╝
"""

_WAVES: tuple[str, ...] = ("🌊", "〜", "～", "〜", "🌊")
_INDENT = " " * 20


def gradient(text: str, colors: Sequence[str] = SUI_GRADIENT) -> Text:
    """Colour *text* left to right, blending linearly through *colors*.

    Multi-line strings are blended per column so every line shares the same sweep.
    """
    stops = [Color.parse(c).get_truecolor() for c in colors]
    lines = text.split("\n")
    width = max((len(line) for line in lines), default=0)
    result = Text()
    for line_no, line in enumerate(lines):
        if line_no:
            result.append("\n")
        for col, char in enumerate(line):
            if len(stops) == 1 or width <= 1:
                triplet = stops[0]
            else:
                position = col / (width - 1) * (len(stops) - 1)
                index = min(int(position), len(stops) - 2)
                triplet = blend_rgb(stops[index], stops[index + 1], position - index)
            result.append(char, style=triplet.hex)
    return result


def _play_waves(frames: int = 3, delay: float = 0.2) -> None:
    for frame in range(frames):
        wave = Text(_INDENT)
        for idx, glyph in enumerate(_WAVES):
            if idx:
                wave.append(" ")
            wave.append(glyph, style=SUI_BLUE if idx == frame % len(_WAVES) else SUI_TEAL)
        _console.print(wave, end="\r")
        time.sleep(delay)
    _console.print()


def show_welcome(animate: bool | None = None) -> None:
    """Print the banner. Clearing and animation only happen on a real terminal."""
    if animate is None:
        animate = _console.is_terminal

    if animate:
        _console.clear()
        _play_waves()

    _console.print(gradient(BANNER.strip("\n")), highlight=False)
    _console.print(f"{_INDENT}[{SUI_TEAL}]⚡ Build dApps on Sui with ease ⚡[/]")
    _console.print()
    _console.print(f"{_INDENT}[grey50]Made by [/][{SUI_BLUE}]DevDanny[/][red] ❤️[/]")
    _console.print()
    _console.print(f"{_INDENT}[{SUI_GREEN}]🌊 Sui means 'water' - fluid, fast, secure 🌊[/]")
    _console.print()


def show_cancel(message: str = "Operation cancelled") -> None:
    _console.print("[dim]│[/]")
    _console.print(f"[red]■[/]  [red]{message}[/]")
    _console.print()


def show_outro(message: str = "✨ Happy building on Sui! ✨") -> None:
    _console.print("[dim]│[/]")
    line = Text("└  ", style="dim")
    line.append_text(gradient(message))
    _console.print(line)
    _console.print()


def next_steps(project_name: str, *, installed: bool, settings: ScaffoldSettings) -> list[str]:
    """Shell commands the user should run next, in order."""
    steps = [f"cd {project_name}"]
    if not installed:
        steps.append(" ".join(settings.install_command))
    steps.append(settings.dev_command)
    return steps


def show_success(
    project_name: str,
    descriptor: TemplateDescriptor,
    *,
    installed: bool,
    settings: ScaffoldSettings,
) -> None:
    """Summarise the new project and list the follow-up commands."""
    _console.print()
    _console.print(gradient("✨ SUI PROJECT CREATED SUCCESSFULLY! ✨"))

    _console.print(f"[{SUI_BLUE}]📦 Project:[/] [bold]{project_name}[/]")
    _console.print(f"[{SUI_TEAL}]🛠️  Template:[/] {descriptor.icon} {descriptor.name}")
    _console.print(f"[{SUI_GREEN}]📍 Location:[/] [dim]./{project_name}[/]")
    _console.print()

    _console.print(gradient("🌊 Dive into development:"))
    _console.print()
    steps = next_steps(project_name, installed=installed, settings=settings)
    for number, command in enumerate(steps, 1):
        _console.print(f"[dim]   {number}.[/] [cyan]{command}[/]", highlight=False)

    _console.print()
    _console.print(
        Panel(
            f"[{SUI_BLUE}]🌊 Sui Tip:[/] Like water finding its path, update "
            f"[cyan]{settings.config_hint_path}[/] with your contract addresses!",
            title="Smart Contract Setup",
            title_align="left",
            border_style="dim",
            expand=False,
        )
    )

    _console.print()
    _console.print(f"[dim]May your code flow like water! [/][{SUI_BLUE}]🌊✨[/]")
    _console.print()
