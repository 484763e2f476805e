"""Typer CLI application for sui-dev-app."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.text import Text
from typer import Exit, Option, Typer

import suidevapp
from suidevapp.cli._config import ScaffoldSettings
from suidevapp.cli._display import show_cancel, show_outro, show_success, show_welcome
from suidevapp.cli._errors import DestinationExistsError, ScaffoldError, UserCancelled
from suidevapp.cli._installer import install_dependencies
from suidevapp.cli._materializer import materialize_project
from suidevapp.cli._process import ExternalProcess, SubprocessRunner
from suidevapp.cli._prompts import collect_project_request, confirm_creation, confirm_install
from suidevapp.cli._registry import DEFAULT_REGISTRY, TemplateRegistry

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"sui-dev-app {suidevapp.__version__}", highlight=False)
        raise Exit()


def scaffold(
    *,
    registry: TemplateRegistry,
    settings: ScaffoldSettings,
    process: ExternalProcess,
    cwd: Path | None = None,
) -> None:
    """Run the whole interactive flow once.

    Raises:
        UserCancelled: If any prompt is cancelled or the creation is declined.
        DestinationExistsError: If the project directory already exists.
        ScaffoldError: For any other fatal failure (e.g. the clone failed).
    """
    request = collect_project_request(registry)
    confirm_creation(request, registry)

    project_path = materialize_project(
        request, registry=registry, settings=settings, process=process, cwd=cwd
    )

    installed = False
    if confirm_install():
        installed = install_dependencies(project_path, settings=settings, process=process)

    show_success(
        request.project_name,
        registry.lookup(request.template_key),
        installed=installed,
        settings=settings,
    )
    show_outro()


@app.command()
def main(
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Sui dApp from a Next.js or React starter template."""
    show_welcome()

    try:
        scaffold(
            registry=DEFAULT_REGISTRY,
            settings=ScaffoldSettings.from_env(),
            process=SubprocessRunner(),
        )
    except UserCancelled as exc:
        show_cancel(str(exc))
        raise Exit(code=0) from None
    except DestinationExistsError as exc:
        show_cancel(str(exc))
        raise Exit(code=1) from None
    except (ScaffoldError, OSError) as exc:
        _err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
        raise Exit(code=1) from exc
