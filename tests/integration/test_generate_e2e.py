"""Integration tests for the complete generation pipeline.

These tests run every step for real, including ``git``, against each
project type and verify the generated tree, the CMS schema and the
repository history.

No network access or Node toolchain is required.
"""

from __future__ import annotations

import json
import subprocess
from pathlib import Path

import pytest
import yaml

from sitegen.config import Settings
from sitegen.pipeline import Pipeline

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _generate(settings: Settings, config) -> Path:
    state = await Pipeline(settings).run(config=config)
    assert state["success"] is True, state
    return settings.project_path(config.project_name)


def _git(project_dir: Path, *args: str) -> str:
    return subprocess.run(
        ["git", *args], cwd=project_dir, check=True, capture_output=True, text=True
    ).stdout


def _front_matter(path: Path) -> dict:
    return yaml.safe_load(path.read_text(encoding="utf-8").split("---")[1])


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestBasicSite:
    @pytest.mark.asyncio
    async def test_tree_and_history(self, git_identity, settings, basic_config):
        project_dir = await _generate(settings, basic_config)

        for relative in (
            "package.json",
            ".eleventy.js",
            "tailwind.config.js",
            "netlify.toml",
            "README.md",
            ".gitignore",
            "src/index.njk",
            "src/about/index.njk",
            "src/services/index.njk",
            "src/contact/index.njk",
            "src/_includes/layouts/base.njk",
            "src/_includes/partials/header.njk",
            "src/_includes/partials/footer.njk",
            "src/_data/site.js",
        ):
            assert (project_dir / relative).is_file(), relative

        assert not (project_dir / "src" / "admin").exists()
        assert not (project_dir / "src" / "_data" / "i18n.js").exists()
        assert _git(project_dir, "log", "--format=%s").strip() == "Initial commit"
        assert "package.json" in _git(project_dir, "ls-files").split()

    @pytest.mark.asyncio
    async def test_build_config(self, git_identity, settings, basic_config):
        project_dir = await _generate(settings, basic_config)
        eleventy = (project_dir / ".eleventy.js").read_text(encoding="utf-8")
        assert 'addCollection("dynamicResources"' in eleventy
        assert "localizedUrl" not in eleventy

        manifest = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
        assert manifest["scripts"] == {"start": "eleventy --serve", "build": "eleventy"}


class TestMultilanguageSite:
    @pytest.mark.asyncio
    async def test_localized_tree(self, git_identity, settings, multilang_config):
        project_dir = await _generate(settings, multilang_config)

        assert (project_dir / "src" / "_data" / "i18n.js").is_file()
        for code in ("es", "fr"):
            home = project_dir / "src" / code / "index.njk"
            assert _front_matter(home)["locale"] == code
            assert (project_dir / "src" / code / "contact" / "index.njk").is_file()
        assert _front_matter(project_dir / "src" / "index.njk")["locale"] == "en"

        header = (project_dir / "src" / "_includes" / "partials" / "header.njk").read_text(encoding="utf-8")
        assert "language-switcher" in header


class TestCmsSite:
    @pytest.mark.asyncio
    async def test_cms_tree(self, git_identity, settings, cms_config):
        project_dir = await _generate(settings, cms_config)

        data = yaml.safe_load((project_dir / "src" / "admin" / "config.yml").read_text(encoding="utf-8"))
        assert [c["name"] for c in data["collections"]] == ["blog", "properties"]
        assert (project_dir / "src" / "properties" / "sample-property.md").is_file()

        netlify = (project_dir / "netlify.toml").read_text(encoding="utf-8")
        assert "[functions]" in netlify
        assert "[dev]" in netlify

        # Files written after the initial commit stay uncommitted.
        assert "src/admin/config.yml" not in _git(project_dir, "ls-files").split()


class TestFullSite:
    @pytest.mark.asyncio
    async def test_everything(self, git_identity, settings, full_config):
        project_dir = await _generate(settings, full_config)

        data = yaml.safe_load((project_dir / "src" / "admin" / "config.yml").read_text(encoding="utf-8"))
        assert [c["name"] for c in data["collections"]] == ["blog", "services", "blog_es", "services_es"]
        assert _front_matter(project_dir / "src" / "es" / "blog" / "sample-blog-post.md")["locale"] == "es"

        resources = sorted(p.name for p in (project_dir / "src" / "_data" / "resources").iterdir())
        assert resources == ["authors.json", "categories.json", "projects.json", "skills.json"]

        eleventy = (project_dir / ".eleventy.js").read_text(encoding="utf-8")
        for fragment in ('addFilter("localizedUrl"', 'addPassthroughCopy("src/admin")', 'addCollection("dynamicResources"'):
            assert eleventy.count(fragment) == 1, fragment

        readme = (project_dir / "README.md").read_text(encoding="utf-8")
        assert readme.index("Multilanguage Support") < readme.index("Content Management") < readme.index("Customization")
