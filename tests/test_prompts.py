"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from suidevapp.cli._errors import UserCancelled
from suidevapp.cli._prompts import (
    Answered,
    Cancelled,
    collect_project_request,
    confirm_creation,
    confirm_install,
    prompt_framework,
    prompt_language,
    prompt_project_name,
    validate_project_name,
)
from suidevapp.cli._registry import TemplateRegistry
from suidevapp.cli._types import Framework, Language, ProjectRequest


class TestValidateProjectName:
    @pytest.mark.parametrize("name", ["my-sui-app", "app_1", "A", "0-_-0"])
    def test_accepts_valid_names(self, name: str) -> None:
        assert validate_project_name(name) is None

    def test_rejects_empty(self) -> None:
        assert validate_project_name("") == "Project name is required!"

    @pytest.mark.parametrize(
        "name",
        ["bad name!", "has space", "dot.name", "slash/name", "ünïcode", "tab\tname", "app\n"],
    )
    def test_rejects_invalid_characters(self, name: str) -> None:
        error = validate_project_name(name)
        assert error is not None
        assert "letters, numbers, hyphens, and underscores" in error


class TestPromptProjectName:
    @patch("builtins.input", return_value="my-sui-app")
    def test_returns_valid_name(self, mock_input: MagicMock) -> None:
        assert prompt_project_name() == Answered("my-sui-app")
        mock_input.assert_called_once()

    @patch("builtins.input", side_effect=["", "bad name!", "my-sui-app"])
    def test_reprompts_until_valid(self, mock_input: MagicMock) -> None:
        assert prompt_project_name() == Answered("my-sui-app")
        assert mock_input.call_count == 3

    @patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_ctrl_c_cancels(self, mock_input: MagicMock) -> None:
        assert isinstance(prompt_project_name(), Cancelled)

    @patch("builtins.input", side_effect=EOFError)
    def test_eof_cancels(self, mock_input: MagicMock) -> None:
        assert isinstance(prompt_project_name(), Cancelled)


class TestPromptFramework:
    @patch("suidevapp.cli._prompts.TerminalMenu")
    def test_returns_next(self, mock_menu_cls: MagicMock, registry: TemplateRegistry) -> None:
        mock_menu_cls.return_value.show.return_value = 0
        assert prompt_framework(registry) == Answered(Framework.NEXT)

    @patch("suidevapp.cli._prompts.TerminalMenu")
    def test_returns_react(self, mock_menu_cls: MagicMock, registry: TemplateRegistry) -> None:
        mock_menu_cls.return_value.show.return_value = 1
        assert prompt_framework(registry) == Answered(Framework.REACT)

    @patch("suidevapp.cli._prompts.TerminalMenu")
    def test_labels_carry_icon_and_hint(
        self, mock_menu_cls: MagicMock, registry: TemplateRegistry
    ) -> None:
        mock_menu_cls.return_value.show.return_value = 0
        prompt_framework(registry)
        entries = mock_menu_cls.call_args.args[0]
        assert entries[0].startswith("🚀 Next.js")
        assert "Client-side React with Vite" in entries[1]

    @patch("suidevapp.cli._prompts.TerminalMenu")
    def test_escape_cancels(self, mock_menu_cls: MagicMock, registry: TemplateRegistry) -> None:
        mock_menu_cls.return_value.show.return_value = None
        assert isinstance(prompt_framework(registry), Cancelled)


class TestPromptLanguage:
    @patch("suidevapp.cli._prompts.TerminalMenu")
    def test_returns_typescript(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0
        assert prompt_language() == Answered(Language.TYPESCRIPT)

    @patch("suidevapp.cli._prompts.TerminalMenu")
    def test_returns_javascript(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1
        assert prompt_language() == Answered(Language.JAVASCRIPT)

    @patch("suidevapp.cli._prompts.TerminalMenu")
    def test_ctrl_c_cancels(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.side_effect = KeyboardInterrupt
        assert isinstance(prompt_language(), Cancelled)


class TestCollectProjectRequest:
    @patch("suidevapp.cli._prompts.TerminalMenu")
    @patch("builtins.input", return_value="my-sui-app")
    def test_builds_request(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock, registry: TemplateRegistry
    ) -> None:
        mock_menu_cls.return_value.show.side_effect = [1, 1]

        request = collect_project_request(registry)

        assert request == ProjectRequest(
            project_name="my-sui-app", framework=Framework.REACT, language=Language.JAVASCRIPT
        )
        assert request.template_key == "react-js"

    @patch("suidevapp.cli._prompts.TerminalMenu")
    @patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_cancel_at_name_skips_menus(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock, registry: TemplateRegistry
    ) -> None:
        with pytest.raises(UserCancelled):
            collect_project_request(registry)
        mock_menu_cls.assert_not_called()

    @patch("suidevapp.cli._prompts.TerminalMenu")
    @patch("builtins.input", return_value="my-sui-app")
    def test_cancel_at_framework(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock, registry: TemplateRegistry
    ) -> None:
        mock_menu_cls.return_value.show.return_value = None
        with pytest.raises(UserCancelled):
            collect_project_request(registry)
        assert mock_menu_cls.call_count == 1

    @patch("suidevapp.cli._prompts.TerminalMenu")
    @patch("builtins.input", return_value="my-sui-app")
    def test_cancel_at_language(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock, registry: TemplateRegistry
    ) -> None:
        mock_menu_cls.return_value.show.side_effect = [0, None]
        with pytest.raises(UserCancelled):
            collect_project_request(registry)


class TestConfirmations:
    @pytest.fixture
    def project_request(self) -> ProjectRequest:
        return ProjectRequest(
            project_name="my-sui-app", framework=Framework.NEXT, language=Language.TYPESCRIPT
        )

    @patch("builtins.input", return_value="")
    def test_creation_default_yes(
        self, mock_input: MagicMock, project_request: ProjectRequest, registry: TemplateRegistry
    ) -> None:
        confirm_creation(project_request, registry)
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="n")
    def test_creation_declined_cancels(
        self, mock_input: MagicMock, project_request: ProjectRequest, registry: TemplateRegistry
    ) -> None:
        with pytest.raises(UserCancelled):
            confirm_creation(project_request, registry)

    @patch("builtins.input", side_effect=EOFError)
    def test_creation_interrupted_cancels(
        self, mock_input: MagicMock, project_request: ProjectRequest, registry: TemplateRegistry
    ) -> None:
        with pytest.raises(UserCancelled):
            confirm_creation(project_request, registry)

    @patch("builtins.input", return_value="yes")
    def test_install_yes(self, mock_input: MagicMock) -> None:
        assert confirm_install() is True

    @patch("builtins.input", return_value="no")
    def test_install_no(self, mock_input: MagicMock) -> None:
        assert confirm_install() is False

    @patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_install_interrupted_cancels(self, mock_input: MagicMock) -> None:
        with pytest.raises(UserCancelled):
            confirm_install()
