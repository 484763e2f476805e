"""Enums and records describing what the user asked for."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Framework(str, Enum):
    """Frontend frameworks a starter template can be built on."""

    NEXT = "next"
    REACT = "react"

    @property
    def label(self) -> str:
        labels: dict[Framework, str] = {
            Framework.NEXT: "Next.js",
            Framework.REACT: "React",
        }
        return labels[self]

    @property
    def hint(self) -> str:
        hints: dict[Framework, str] = {
            Framework.NEXT: "Full-stack React framework with SSR",
            Framework.REACT: "Client-side React with Vite",
        }
        return hints[self]


class Language(str, Enum):
    """Source language of the starter template."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @property
    def label(self) -> str:
        labels: dict[Language, str] = {
            Language.TYPESCRIPT: "🔷 TypeScript",
            Language.JAVASCRIPT: "🟨 JavaScript",
        }
        return labels[self]

    @property
    def hint(self) -> str:
        hints: dict[Language, str] = {
            Language.TYPESCRIPT: "Type-safe development experience",
            Language.JAVASCRIPT: "Simple and flexible development",
        }
        return hints[self]

    @property
    def abbreviation(self) -> str:
        return "ts" if self is Language.TYPESCRIPT else "js"


def template_key(framework: Framework, language: Language) -> str:
    """Registry key for a framework/language pair, e.g. ``next-ts``."""
    return f"{framework.value}-{language.abbreviation}"


@dataclass(frozen=True, kw_only=True)
class ProjectRequest:
    """
    Answers collected from the interactive prompts.

    Attributes:
        project_name: Directory name for the new project.
        framework: Chosen framework.
        language: Chosen language.
    """

    project_name: str
    framework: Framework
    language: Language

    @property
    def template_key(self) -> str:
        return template_key(self.framework, self.language)
