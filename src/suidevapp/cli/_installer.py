"""Optional ``npm install`` step for a freshly scaffolded project."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from suidevapp.cli._config import ScaffoldSettings
from suidevapp.cli._display import SUI_GREEN
from suidevapp.cli._errors import ProcessFailedError
from suidevapp.cli._process import ExternalProcess, StreamMode

_console = Console()
_err_console = Console(stderr=True)


def install_dependencies(
    project_path: Path, *, settings: ScaffoldSettings, process: ExternalProcess
) -> bool:
    """Run the package manager's install inside *project_path*.

    Output streams are inherited so progress is visible. Failure is reported but
    never raised; the return value tells the caller whether it worked.
    """
    command = settings.install_command
    _console.print(f"[bold cyan]◆[/]  Installing dependencies ({' '.join(command)})...")

    try:
        process.run(command, cwd=project_path, streams=StreamMode.INHERITED)
    except ProcessFailedError as exc:
        _console.print("[red]✗ Failed to install dependencies[/]")
        _err_console.print(exc.detail, markup=False, highlight=False)
        return False

    _console.print(f"[{SUI_GREEN}]✓ Dependencies installed![/]")
    return True
