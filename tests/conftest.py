"""Shared pytest fixtures for the website generator test suite.

Provides reusable fixtures for:
- Tool settings rooted in a temporary working directory
- Configuration records for every project type
- A real template renderer and a base project factory
- Mocked command runner and prompter
- Git identity for tests that create real commits
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, Awaitable, Callable
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from sitegen.catalog import TAG_BASIC, TAG_BLOG, TAG_CMS, TAG_MULTILANGUAGE, TAG_PORTFOLIO
from sitegen.config import ProjectConfig, Settings
from sitegen.prompts import Prompter
from sitegen.scaffolder.project_gen import BaseProjectGenerator
from sitegen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Settings & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Working directory in which projects are generated (auto-cleanup)."""
    directory = tmp_path / "work"
    directory.mkdir()
    yield directory


@pytest.fixture
def settings(work_dir: Path) -> Settings:
    return Settings(work_dir=work_dir)


# ---------------------------------------------------------------------------
# Configuration records
# ---------------------------------------------------------------------------


@pytest.fixture
def basic_config() -> ProjectConfig:
    """Static-content project without optional features."""
    return ProjectConfig(projectName="Test Site", projectType=[TAG_BASIC])


@pytest.fixture
def multilang_config() -> ProjectConfig:
    return ProjectConfig(
        projectName="Test Site",
        projectType=[TAG_BASIC, TAG_MULTILANGUAGE],
        languages=["English", "Spanish", "French"],
    )


@pytest.fixture
def cms_config() -> ProjectConfig:
    return ProjectConfig(
        projectName="Test Site",
        projectType=[TAG_BASIC, TAG_CMS],
        dynamicResources=["News/Blog", "Properties"],
    )


@pytest.fixture
def full_config() -> ProjectConfig:
    """Multilanguage + CMS project with category tags for seed data."""
    return ProjectConfig(
        projectName="Test Site",
        projectType=[TAG_BASIC, TAG_MULTILANGUAGE, TAG_CMS, TAG_PORTFOLIO, TAG_BLOG],
        languages=["English", "Spanish"],
        dynamicResources=["News/Blog", "Services"],
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    """The real renderer over the packaged templates."""
    return TemplateRenderer()


@pytest.fixture
def build_base(
    renderer: TemplateRenderer, work_dir: Path
) -> Callable[[ProjectConfig], Awaitable[Path]]:
    """Factory creating the base project for a configuration.

    Usage::

        async def test_something(build_base, cms_config):
            project_dir = await build_base(cms_config)
    """

    async def factory(config: ProjectConfig) -> Path:
        return await BaseProjectGenerator(renderer).generate(config, work_dir)

    return factory


# ---------------------------------------------------------------------------
# Mocks
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_run_command():
    """Patch the git step's command runner; every command succeeds by default.

    Usage::

        def test_git(mock_run_command):
            mock_run_command.return_value = (1, "", "boom")
    """
    with patch(
        "sitegen.scaffolder.git_init.run_command",
        new_callable=AsyncMock,
        return_value=(0, "", ""),
    ) as mocked:
        yield mocked


@pytest.fixture
def scripted_prompter() -> Callable[..., MagicMock]:
    """Factory for a prompter that returns canned answers.

    Validators passed by the collector are invoked on the canned answers so
    validation behaviour stays observable.
    """

    def factory(
        name: str = "My Site",
        project_type: str = "11ty with static content (Home, About, Services, Contacts)",
        resources: list[str] | None = None,
        languages: list[str] | None = None,
    ) -> MagicMock:
        prompter = MagicMock(spec=Prompter)

        def ask_text(prompt: str, validate: Any = None) -> str:
            if validate is not None:
                outcome = validate(name)
                if outcome is not True:
                    raise ValueError(outcome)
            return name

        def ask_multi_choice(prompt, options, validate=None, default=None):
            answer = resources if "resources" in prompt else languages
            answer = list(answer if answer is not None else default or [])
            if validate is not None:
                outcome = validate(answer)
                if outcome is not True:
                    raise ValueError(outcome)
            return answer

        prompter.ask_text.side_effect = ask_text
        prompter.ask_choice.return_value = project_type
        prompter.ask_multi_choice.side_effect = ask_multi_choice
        return prompter

    return factory


# ---------------------------------------------------------------------------
# Git
# ---------------------------------------------------------------------------


@pytest.fixture
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Commit identity for real git commands; skips when git is unavailable."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Sitegen Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@sitegen.local")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Sitegen Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@sitegen.local")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", "/dev/null")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
