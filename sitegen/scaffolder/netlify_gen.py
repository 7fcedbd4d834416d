"""Netlify deployment configuration."""

from __future__ import annotations

from pathlib import Path

from sitegen.config import ProjectConfig
from sitegen.utils import print_error, print_info, print_success

from .context import require_project_root
from .documents import SiteDocuments, update_package_json, write_netlify
from .templates import TemplateRenderer

PUBLISH_DIR = "_site"
FUNCTIONS_DIR = "functions"


class NetlifyGenerator:
    """Completes ``netlify.toml`` and pins the production build script."""

    title = "Configure Netlify deployment"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(self, config: ProjectConfig, work_dir: Path) -> Path:
        project_dir = require_project_root(config, work_dir, self.title)
        try:
            print_info("Adding Netlify deployment configuration...")
            docs = SiteDocuments.load(project_dir, config)
            docs.netlify.build_command = "npm run build"
            docs.netlify.publish = PUBLISH_DIR
            docs.netlify.functions = FUNCTIONS_DIR
            await write_netlify(self.renderer, project_dir, docs)
            await docs.save(project_dir)

            await update_package_json(project_dir, scripts={"build": "eleventy"})
        except OSError as exc:
            print_error(f"Error adding Netlify deployment configuration: {exc}")
            raise

        print_success("Netlify deployment configuration added successfully!")
        return project_dir
