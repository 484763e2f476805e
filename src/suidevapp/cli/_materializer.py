"""Creates the project directory and fills it from a starter template."""

from __future__ import annotations

import shutil
from pathlib import Path

from rich.console import Console
from rich.text import Text

from suidevapp.cli._config import ScaffoldSettings
from suidevapp.cli._display import SUI_BLUE, SUI_GREEN
from suidevapp.cli._errors import DestinationExistsError, ProcessFailedError, TemplateFetchError
from suidevapp.cli._process import ExternalProcess, StreamMode
from suidevapp.cli._registry import TemplateDescriptor, TemplateRegistry
from suidevapp.cli._types import ProjectRequest

_console = Console()
_err_console = Console(stderr=True)


def _clone_args(
    descriptor: TemplateDescriptor, destination: Path, settings: ScaffoldSettings
) -> list[str]:
    return [
        settings.git_executable,
        "clone",
        "--quiet",
        "--depth",
        str(settings.clone_depth),
        "--branch",
        descriptor.branch,
        descriptor.clone_url(settings.git_host),
        str(destination),
    ]


def fetch_template(
    template_key: str,
    destination: Path,
    *,
    registry: TemplateRegistry,
    settings: ScaffoldSettings,
    process: ExternalProcess,
) -> TemplateDescriptor:
    """Shallow-clone the template into *destination* and drop its git history.

    Clone output is captured; only a spinner is shown while it runs.

    Raises:
        UnknownTemplateKindError: If *template_key* is not registered.
        TemplateFetchError: If the clone fails for any reason. Not retried.
    """
    descriptor = registry.lookup(template_key)
    args = _clone_args(descriptor, destination, settings)

    status = f"[{SUI_BLUE}]Downloading {descriptor.icon} {descriptor.name} template...[/]"
    try:
        with _console.status(status, spinner="dots"):
            process.run(args, streams=StreamMode.CAPTURED)
    except ProcessFailedError as exc:
        _console.print("[red]✗ Failed to download template[/]")
        _err_console.print(Text.assemble(("⚠️  Error: ", "yellow"), exc.detail))
        raise TemplateFetchError(descriptor.key, exc.detail) from exc

    metadata_dir = destination / settings.vcs_metadata_dir
    if metadata_dir.is_dir() and not metadata_dir.is_symlink():
        shutil.rmtree(metadata_dir)
    elif metadata_dir.exists() or metadata_dir.is_symlink():
        metadata_dir.unlink()

    _console.print(f"[{SUI_GREEN}]✓ {descriptor.icon} Template downloaded successfully![/]")
    return descriptor


def materialize_project(
    request: ProjectRequest,
    *,
    registry: TemplateRegistry,
    settings: ScaffoldSettings,
    process: ExternalProcess,
    cwd: Path | None = None,
) -> Path:
    """Create ``<cwd>/<project_name>`` and populate it from the chosen template.

    A failed fetch leaves the partially populated directory in place.

    Raises:
        DestinationExistsError: If anything already lives at the target path.
        TemplateFetchError: Propagated from :func:`fetch_template`.
    """
    project_path = (cwd or Path.cwd()) / request.project_name

    if project_path.exists() or project_path.is_symlink():
        raise DestinationExistsError(project_path)

    project_path.mkdir(parents=True)

    fetch_template(
        request.template_key,
        project_path,
        registry=registry,
        settings=settings,
        process=process,
    )
    return project_path
