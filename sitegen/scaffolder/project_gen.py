"""Base Eleventy project generation.

Creates the directory skeleton of a new site and writes the files every
project starts with: ``package.json``, the Eleventy and Tailwind
configuration, the base layout, site metadata, asset starters and a README
tailored to the selected feature combination.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from sitegen.catalog import BASE_DEPENDENCIES
from sitegen.config import ProjectConfig
from sitegen.utils import ensure_dir, print_error, print_info, print_success, save_json

from .context import SITE_DESCRIPTION, build_context
from .documents import (
    SiteDocuments,
    write_base_layout,
    write_build_config,
    write_readme,
)
from .templates import TemplateRenderer

# Directories created below the project root.
SKELETON_DIRS: tuple[str, ...] = (
    "src",
    "src/_includes",
    "src/_includes/layouts",
    "src/_includes/partials",
    "src/_data",
    "src/assets",
    "src/assets/css",
    "src/assets/js",
)


class BaseProjectGenerator:
    """Writes the base project every other step builds on."""

    title = "Create base project"

    # Template name -> output path relative to the project root
    _STATIC_FILES: dict[str, str] = {
        "tailwind.config.js.j2": "tailwind.config.js",
        "site.js.j2": "src/_data/site.js",
        "assets/styles.css.j2": "src/assets/css/styles.css",
        "assets/main.js.j2": "src/assets/js/main.js",
        "gitignore.j2": ".gitignore",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(self, config: ProjectConfig, work_dir: Path) -> Path:
        """Create the project below *work_dir* and return its root."""
        project_dir = Path(work_dir) / config.project_name
        try:
            print_info("Creating project directories...")
            await asyncio.to_thread(self._create_skeleton, project_dir, config)

            print_info("Creating package.json...")
            await save_json(self.package_manifest(config), project_dir / "package.json")

            print_info("Creating configuration files...")
            context = build_context(config)
            docs = SiteDocuments.for_config(config)
            await write_build_config(self.renderer, project_dir, docs)
            await write_base_layout(self.renderer, project_dir, docs)
            for template_name, output_name in self._STATIC_FILES.items():
                await self.renderer.render_to_file(
                    template_name, project_dir / output_name, context
                )

            print_info("Creating README.md...")
            await write_readme(self.renderer, project_dir, docs, context)
            await docs.save(project_dir)
        except OSError as exc:
            print_error(f"Error creating base project: {exc}")
            raise

        print_success("Base 11ty project created successfully!")
        return project_dir

    @staticmethod
    def package_manifest(config: ProjectConfig) -> dict:
        """The initial ``package.json`` contents."""
        return {
            "name": config.package_name,
            "version": "1.0.0",
            "description": SITE_DESCRIPTION,
            "scripts": {
                "start": "eleventy --serve",
                "build": "eleventy",
            },
            "dependencies": dict(BASE_DEPENDENCIES),
        }

    @staticmethod
    def _create_skeleton(project_dir: Path, config: ProjectConfig) -> None:
        for relative in SKELETON_DIRS:
            ensure_dir(project_dir / relative)
        # The default locale lives at the source root.
        for locale in config.additional_locales:
            ensure_dir(project_dir / "src" / locale.code)
