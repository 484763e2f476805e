"""Runtime settings for the scaffolder."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath

_ENV_OVERRIDES: dict[str, str] = {
    "git_host": "SUI_DEV_APP_GIT_HOST",
    "git_executable": "SUI_DEV_APP_GIT",
    "package_manager": "SUI_DEV_APP_PACKAGE_MANAGER",
}


@dataclass(frozen=True, kw_only=True)
class ScaffoldSettings:
    """
    Settings shared by the fetcher, the installer and the final report.

    Attributes:
        git_host: Host that ``<owner>/<repo>`` identifiers are resolved against.
        git_executable: Version-control client used for cloning.
        package_manager: Client used to install the template's dependencies.
        vcs_metadata_dir: Directory removed from the clone after download.
        clone_depth: History depth passed to ``git clone --depth``.
        config_hint_path: File the user is told to edit once the project exists.
    """

    git_host: str = "github.com"
    git_executable: str = "git"
    package_manager: str = "npm"
    vcs_metadata_dir: str = ".git"
    clone_depth: int = 1
    config_hint_path: str = "lib/smart-contract/config.json"

    def __post_init__(self) -> None:
        if not self.git_host:
            raise ValueError("git_host must be non-empty.")
        if not self.git_executable:
            raise ValueError("git_executable must be non-empty.")
        if not self.package_manager:
            raise ValueError("package_manager must be non-empty.")
        if self.clone_depth <= 0:
            raise ValueError(f"clone_depth must be positive, got {self.clone_depth}.")
        parts = PurePath(self.vcs_metadata_dir).parts
        if len(parts) != 1 or parts[0] in (".", ".."):
            raise ValueError(
                f"vcs_metadata_dir must be a single directory name, got {self.vcs_metadata_dir!r}."
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScaffoldSettings:
        """Build settings, letting ``SUI_DEV_APP_*`` variables override the defaults."""
        env = os.environ if environ is None else environ
        overrides = {field: env[var] for field, var in _ENV_OVERRIDES.items() if env.get(var)}
        return cls(**overrides)

    @property
    def install_command(self) -> tuple[str, ...]:
        return (self.package_manager, "install")

    @property
    def dev_command(self) -> str:
        return f"{self.package_manager} run dev"
