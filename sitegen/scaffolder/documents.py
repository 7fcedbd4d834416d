"""Structured documents shared by several generation steps.

A handful of generated files receive contributions from more than one step:
the Eleventy build configuration, the base layout, the header partial, the
README and ``netlify.toml``.  Instead of patching those files textually, each
step loads a ``SiteDocuments`` model, merges its own section in and the file
is re-rendered in full from the model.  Merges have set semantics, so
applying the same contribution twice leaves the rendered output unchanged.

The model is persisted next to the generated project in ``.sitegen.json``
so that steps run separately (``sitegen --step cms``) see what earlier steps
contributed.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from sitegen.catalog import NAV_LINKS, Locale
from sitegen.config import ProjectConfig
from sitegen.utils import load_json, save_json, write_text

from .templates import TemplateRenderer

STATE_FILENAME = ".sitegen.json"

# Build configuration features, in the order they appear in .eleventy.js.
BUILD_NAVIGATION = "navigation"
BUILD_YEAR = "year"
BUILD_I18N = "i18n"
BUILD_RESOURCES = "resources"

LAYOUT_IDENTITY = "identity"


class ReadmeSection(BaseModel):
    """A keyed README section rendered from its own template."""

    key: str
    template: str


class NetlifyDocument(BaseModel):
    """Contents of ``netlify.toml``."""

    build_command: str = "npm run build"
    publish: str = "_site"
    functions: str | None = None
    dev_command: str | None = None
    dev_port: int | None = None


class SiteDocuments(BaseModel):
    """Merged contributions to the shared generated files."""

    build_features: list[str] = Field(
        default_factory=lambda: [BUILD_NAVIGATION, BUILD_YEAR]
    )
    passthrough: list[str] = Field(default_factory=lambda: ["src/assets"])
    layout_features: list[str] = Field(default_factory=list)
    switcher_locales: list[Locale] = Field(default_factory=list)
    readme_sections: list[ReadmeSection] = Field(default_factory=list)
    netlify: NetlifyDocument = Field(default_factory=NetlifyDocument)

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def add_build_feature(self, name: str) -> bool:
        """Enable a build configuration feature.  Returns ``False`` if already on."""
        return _add_unique(self.build_features, name)

    def add_passthrough(self, path: str) -> bool:
        """Register a passthrough-copied path.  Returns ``False`` if already present."""
        return _add_unique(self.passthrough, path)

    def add_layout_feature(self, name: str) -> bool:
        return _add_unique(self.layout_features, name)

    def set_language_switcher(self, locales: list[Locale]) -> None:
        """Replace the locales linked from the header's language switcher."""
        self.switcher_locales = list(locales)

    def upsert_readme_section(self, section: ReadmeSection, before: str | None = None) -> None:
        """Replace the section with the same key, or insert it.

        New sections go right before the section keyed *before* when it
        exists, otherwise at the end.
        """
        for index, existing in enumerate(self.readme_sections):
            if existing.key == section.key:
                self.readme_sections[index] = section
                return
        keys = [existing.key for existing in self.readme_sections]
        if before is not None and before in keys:
            self.readme_sections.insert(keys.index(before), section)
        else:
            self.readme_sections.append(section)

    def readme_keys(self) -> list[str]:
        return [section.key for section in self.readme_sections]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @classmethod
    def for_config(cls, config: ProjectConfig) -> "SiteDocuments":
        """The documents as written by the base project step."""
        return cls(readme_sections=default_readme_sections(config))

    @classmethod
    def load(cls, project_root: Path, config: ProjectConfig) -> "SiteDocuments":
        """Load the persisted documents, or the base defaults if none were saved."""
        path = Path(project_root) / STATE_FILENAME
        if not path.exists():
            return cls.for_config(config)
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    async def save(self, project_root: Path) -> Path:
        path = Path(project_root) / STATE_FILENAME
        await asyncio.to_thread(write_text, path, self.model_dump_json(indent=2) + "\n")
        return path


def _add_unique(items: list[str], value: str) -> bool:
    if value in items:
        return False
    items.append(value)
    return True


def default_readme_sections(config: ProjectConfig) -> list[ReadmeSection]:
    """README sections for the selected feature combination."""
    keys = ["intro", "structure", "technologies"]
    if config.is_multilanguage:
        keys.append("multilanguage")
    sections = [ReadmeSection(key=key, template=f"readme/{key}.md.j2") for key in keys]
    if config.is_cms:
        sections.append(ReadmeSection(key="cms", template="readme/cms_summary.md.j2"))
    for key in ("customization", "learn_more", "deployment"):
        sections.append(ReadmeSection(key=key, template=f"readme/{key}.md.j2"))
    return sections


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


async def write_build_config(
    renderer: TemplateRenderer, project_root: Path, docs: SiteDocuments
) -> Path:
    """Render ``.eleventy.js`` from the merged build features."""
    return await renderer.render_to_file(
        "eleventy.js.j2", project_root / ".eleventy.js", {"doc": docs}
    )


async def write_base_layout(
    renderer: TemplateRenderer, project_root: Path, docs: SiteDocuments
) -> Path:
    return await renderer.render_to_file(
        "layouts/base.njk.j2",
        project_root / "src" / "_includes" / "layouts" / "base.njk",
        {"doc": docs},
    )


async def write_header(
    renderer: TemplateRenderer, project_root: Path, docs: SiteDocuments
) -> Path:
    """Render the header partial; nav labels are translated once a switcher exists."""
    return await renderer.render_to_file(
        "partials/header.njk.j2",
        project_root / "src" / "_includes" / "partials" / "header.njk",
        {"doc": docs, "nav_links": NAV_LINKS},
    )


async def write_readme(
    renderer: TemplateRenderer,
    project_root: Path,
    docs: SiteDocuments,
    context: dict[str, Any],
) -> Path:
    """Render every README section in order and join them."""
    parts = [
        renderer.render(section.template, context).strip("\n")
        for section in docs.readme_sections
    ]
    out = project_root / "README.md"
    await asyncio.to_thread(write_text, out, "\n\n".join(parts) + "\n")
    return out


async def write_netlify(
    renderer: TemplateRenderer, project_root: Path, docs: SiteDocuments
) -> Path:
    return await renderer.render_to_file(
        "netlify.toml.j2", project_root / "netlify.toml", {"doc": docs}
    )


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------


async def update_package_json(
    project_root: Path,
    *,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
    scripts: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Merge entries into the generated ``package.json``.

    Existing keys that are not mentioned are preserved.  Returns the merged
    manifest.
    """
    path = project_root / "package.json"
    manifest = await asyncio.to_thread(load_json, path)

    for key, entries in (
        ("dependencies", dependencies),
        ("devDependencies", dev_dependencies),
        ("scripts", scripts),
    ):
        if entries:
            manifest[key] = {**manifest.get(key, {}), **entries}

    await save_json(manifest, path)
    return manifest
