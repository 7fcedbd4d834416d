"""Multilanguage support: translation data, URL/translation filters and a language switcher."""

from __future__ import annotations

from pathlib import Path

from sitegen.catalog import TRANSLATIONS
from sitegen.config import ProjectConfig
from sitegen.utils import print_error, print_info, print_success, print_warning

from .context import build_context, require_project_root
from .documents import BUILD_I18N, SiteDocuments, write_build_config, write_header
from .pages_gen import StaticPagesGenerator
from .templates import TemplateRenderer


class MultilanguageGenerator:
    """Adds i18n data and localized home pages to a multilanguage project."""

    title = "Add multilanguage support"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(self, config: ProjectConfig, work_dir: Path) -> Path | None:
        """Augment the project; returns ``None`` when multilanguage mode is off."""
        if not config.is_multilanguage or not config.languages:
            print_warning("This is not a multilanguage project. Skipping this step.")
            return None

        project_dir = require_project_root(config, work_dir, self.title)
        context = build_context(config)
        translations = {locale.code: TRANSLATIONS[locale.code] for locale in config.locales}
        try:
            print_info("Setting up multilanguage structure...")
            await self.renderer.render_to_file(
                "i18n/i18n.js.j2",
                project_dir / "src" / "_data" / "i18n.js",
                {**context, "translations": translations},
            )

            docs = SiteDocuments.load(project_dir, config)
            docs.add_build_feature(BUILD_I18N)
            docs.set_language_switcher(config.locales)
            await write_build_config(self.renderer, project_dir, docs)
            await write_header(self.renderer, project_dir, docs)
            await docs.save(project_dir)

            print_info("Creating localized home pages...")
            for locale in config.locales:
                root = StaticPagesGenerator.locale_root(project_dir, locale)
                await self.renderer.render_to_file(
                    "i18n/home.njk.j2",
                    root / "index.njk",
                    {**context, "locale": locale, "translations": translations[locale.code]},
                )
        except OSError as exc:
            print_error(f"Error adding multilanguage support: {exc}")
            raise

        print_success("Multilanguage support added successfully!")
        return project_dir
