"""Static table of the starter templates that can be scaffolded."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from suidevapp.cli._errors import UnknownTemplateKindError
from suidevapp.cli._types import Framework, Language, template_key


@dataclass(frozen=True, kw_only=True)
class TemplateDescriptor:
    """
    One scaffoldable starter project.

    Attributes:
        key: Registry key, ``<framework>-<ts|js>``.
        name: Display name.
        description: One-line summary shown to the user.
        source_repository: ``<owner>/<repo>`` on the git host.
        branch: Branch to clone.
        icon: Decorative emoji.
    """

    key: str
    name: str
    description: str
    source_repository: str
    branch: str
    icon: str

    def __post_init__(self) -> None:
        owner, _, repo = self.source_repository.partition("/")
        if not owner or not repo or "/" in repo:
            raise ValueError(
                f"source_repository must look like '<owner>/<repo>', "
                f"got {self.source_repository!r}."
            )
        if not self.branch:
            raise ValueError(f"branch must be non-empty for template {self.key!r}.")

    def clone_url(self, host: str = "github.com") -> str:
        return f"https://{host}/{self.source_repository}.git"


class TemplateRegistry(Mapping[str, TemplateDescriptor]):
    """Read-only mapping from registry key to descriptor."""

    def __init__(self, descriptors: Iterable[TemplateDescriptor]) -> None:
        by_key: dict[str, TemplateDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.key in by_key:
                raise ValueError(f"Duplicate template key {descriptor.key!r}.")
            by_key[descriptor.key] = descriptor
        self._by_key = MappingProxyType(by_key)

    def __getitem__(self, key: str) -> TemplateDescriptor:
        return self.lookup(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_key)

    def __len__(self) -> int:
        return len(self._by_key)

    def lookup(self, key: str) -> TemplateDescriptor:
        try:
            return self._by_key[key]
        except KeyError:
            raise UnknownTemplateKindError(key) from None

    def resolve(self, framework: Framework, language: Language) -> TemplateDescriptor:
        return self.lookup(template_key(framework, language))


DEFAULT_REGISTRY = TemplateRegistry(
    [
        TemplateDescriptor(
            key="next-ts",
            name="Next.js + TypeScript",
            description="Full-stack Next.js with TypeScript and App Router",
            source_repository="Verifieddanny/next-sui-typescript",
            branch="main",
            icon="🚀",
        ),
        TemplateDescriptor(
            key="next-js",
            name="Next.js + JavaScript",
            description="Full-stack Next.js with JavaScript and App Router",
            source_repository="Verifieddanny/next-sui-javascript",
            branch="main",
            icon="🚀",
        ),
        TemplateDescriptor(
            key="react-ts",
            name="React + TypeScript",
            description="React with TypeScript and Vite",
            source_repository="Verifieddanny/react-sui-typescript",
            branch="main",
            icon="⚛️",
        ),
        TemplateDescriptor(
            key="react-js",
            name="React + JavaScript",
            description="React with JavaScript and Vite",
            source_repository="Verifieddanny/react-sui-javascript",
            branch="main",
            icon="⚛️",
        ),
    ]
)
