"""Decap CMS integration.

Adds the admin panel and its collection schema, a content folder with a
sample document and a layout per resource type, and merges the CMS
contributions into ``package.json``, the build configuration, the base
layout, ``netlify.toml`` and the README.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sitegen.catalog import CMS_DEPENDENCIES, CMS_DEV_DEPENDENCIES, CMS_SCRIPTS
from sitegen.config import ProjectConfig
from sitegen.utils import print_error, print_info, print_success, print_warning
from sitegen.validate import load_yaml_file

from .context import build_context, require_project_root
from .documents import (
    LAYOUT_IDENTITY,
    ReadmeSection,
    SiteDocuments,
    update_package_json,
    write_base_layout,
    write_build_config,
    write_netlify,
    write_readme,
)
from .templates import TemplateRenderer

ADMIN_DIR = "src/admin"


class CmsGenerator:
    """Integrates Decap CMS into a CMS-mode project."""

    title = "Add CMS integration"

    def __init__(self, renderer: TemplateRenderer, branch: str = "main") -> None:
        self.renderer = renderer
        self.branch = branch

    async def generate(self, config: ProjectConfig, work_dir: Path) -> Path | None:
        """Integrate the CMS; returns ``None`` when CMS mode is off."""
        if not config.is_cms:
            print_warning("This project does not use a CMS. Skipping this step.")
            return None

        project_dir = require_project_root(config, work_dir, self.title)
        context = build_context(config)
        try:
            print_info("Creating admin panel...")
            admin_dir = project_dir / ADMIN_DIR
            await self.renderer.render_to_file(
                "cms/admin_index.html.j2", admin_dir / "index.html", context
            )
            config_path = await self.renderer.render_to_file(
                "cms/config.yml.j2",
                admin_dir / "config.yml",
                {"collections": self.collections(config), "branch": self.branch},
            )
            load_yaml_file(config_path, self.title)

            print_info("Updating package.json...")
            await update_package_json(
                project_dir,
                dependencies=CMS_DEPENDENCIES,
                dev_dependencies=CMS_DEV_DEPENDENCIES,
                scripts=CMS_SCRIPTS,
            )

            print_info("Creating content folders and layouts...")
            await self._write_resources(project_dir, config, context)

            docs = SiteDocuments.load(project_dir, config)
            docs.add_passthrough(ADMIN_DIR)
            docs.add_layout_feature(LAYOUT_IDENTITY)
            docs.netlify.dev_command = "npm start"
            docs.netlify.dev_port = 8080
            docs.upsert_readme_section(
                ReadmeSection(key="cms", template="readme/cms.md.j2"),
                before="customization",
            )
            await write_build_config(self.renderer, project_dir, docs)
            await write_base_layout(self.renderer, project_dir, docs)
            await write_netlify(self.renderer, project_dir, docs)
            await write_readme(self.renderer, project_dir, docs, context)
            await docs.save(project_dir)
        except OSError as exc:
            print_error(f"Error adding CMS integration: {exc}")
            raise

        print_success("Decap CMS integration added successfully!")
        return project_dir

    @staticmethod
    def collections(config: ProjectConfig) -> list[dict[str, Any]]:
        """Collection definitions for ``config.yml``.

        One folder collection per resource type, then in multilanguage mode
        one more per resource type and additional locale, stored under the
        locale's directory and tagged with a hidden ``locale`` field.
        """
        resources = build_context(config)["resources"]
        collections = [
            {
                **resource,
                "name": resource["collection"],
                "folder": f"src/{resource['folder']}",
                "locale": None,
            }
            for resource in resources
        ]
        for locale in config.additional_locales:
            for resource in resources:
                collections.append(
                    {
                        **resource,
                        "name": f"{resource['collection']}_{locale.code}",
                        "label": f"{resource['label']} ({locale.name})",
                        "folder": f"src/{locale.code}/{resource['folder']}",
                        "locale": locale.code,
                    }
                )
        return collections

    async def _write_resources(
        self, project_dir: Path, config: ProjectConfig, context: dict[str, Any]
    ) -> None:
        layouts_dir = project_dir / "src" / "_includes" / "layouts"
        for resource in context["resources"]:
            await self.renderer.render_to_file(
                "cms/layout.njk.j2",
                layouts_dir / f"{resource['collection']}.njk",
                {"resource": resource},
            )
            await self.renderer.render_to_file(
                "cms/sample.md.j2",
                project_dir / "src" / resource["folder"] / f"{resource['sample_slug']}.md",
                {"resource": resource, "locale": None},
            )
            for locale in config.additional_locales:
                await self.renderer.render_to_file(
                    "cms/sample.md.j2",
                    project_dir
                    / "src"
                    / locale.code
                    / resource["folder"]
                    / f"{resource['sample_slug']}.md",
                    {"resource": resource, "locale": locale.code},
                )
