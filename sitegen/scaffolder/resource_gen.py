"""Seed data for site categories and the collection that exposes it."""

from __future__ import annotations

from pathlib import Path

from sitegen.catalog import SAMPLE_RESOURCES
from sitegen.config import ProjectConfig
from sitegen.utils import ensure_dir, print_error, print_info, print_success, save_json

from .context import require_project_root
from .documents import BUILD_RESOURCES, SiteDocuments, write_build_config
from .templates import TemplateRenderer

RESOURCES_DIR = "src/_data/resources"


class DynamicResourceGenerator:
    """Writes sample JSON data for the portfolio, business and blog categories."""

    title = "Add dynamic resources"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(self, config: ProjectConfig, work_dir: Path) -> Path:
        project_dir = require_project_root(config, work_dir, self.title)
        try:
            print_info("Creating dynamic resources...")
            resources_dir = ensure_dir(project_dir / RESOURCES_DIR)
            written = await self.write_samples(config, resources_dir)
            if not written:
                print_info("No category-specific sample data for this project type.")

            docs = SiteDocuments.load(project_dir, config)
            docs.add_build_feature(BUILD_RESOURCES)
            await write_build_config(self.renderer, project_dir, docs)
            await docs.save(project_dir)
        except OSError as exc:
            print_error(f"Error adding dynamic resources: {exc}")
            raise

        print_success("Dynamic resources added successfully!")
        return project_dir

    @staticmethod
    async def write_samples(config: ProjectConfig, resources_dir: Path) -> list[Path]:
        """Write one JSON file per data set of every category tag in *config*."""
        written: list[Path] = []
        for tag, datasets in SAMPLE_RESOURCES.items():
            if not config.has_tag(tag):
                continue
            for basename, data in datasets.items():
                written.append(await save_json(data, resources_dir / f"{basename}.json"))
        return written
