"""Static page generation: header and footer partials plus the fixed page set."""

from __future__ import annotations

from pathlib import Path

from sitegen.catalog import STATIC_PAGES, Locale
from sitegen.config import ProjectConfig
from sitegen.utils import print_error, print_info, print_success

from .context import build_context, require_project_root
from .documents import SiteDocuments, write_header
from .templates import TemplateRenderer


class StaticPagesGenerator:
    """Writes Home, About, Services and Contact for every locale of the site."""

    title = "Add static pages"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(self, config: ProjectConfig, work_dir: Path) -> Path:
        project_dir = require_project_root(config, work_dir, self.title)
        try:
            print_info("Creating header and footer partials...")
            docs = SiteDocuments.load(project_dir, config)
            await write_header(self.renderer, project_dir, docs)
            await self.renderer.render_to_file(
                "partials/footer.njk.j2",
                project_dir / "src" / "_includes" / "partials" / "footer.njk",
                {},
            )

            print_info("Creating static pages...")
            context = build_context(config)
            if config.is_multilanguage:
                for locale in config.locales:
                    await self._write_pages(self.locale_root(project_dir, locale), context, locale)
            else:
                await self._write_pages(project_dir / "src", context, None)
        except OSError as exc:
            print_error(f"Error adding static pages: {exc}")
            raise

        print_success("Static pages created successfully!")
        return project_dir

    @staticmethod
    def locale_root(project_dir: Path, locale: Locale) -> Path:
        """Source directory of *locale*; the default locale uses ``src/`` itself."""
        if locale.is_default:
            return project_dir / "src"
        return project_dir / "src" / locale.code

    async def _write_pages(self, root: Path, context: dict, locale: Locale | None) -> list[Path]:
        written = []
        for page in STATIC_PAGES:
            path = await self.renderer.render_to_file(
                "pages/page.njk.j2",
                page.path_in(root),
                {**context, "page": page, "locale": locale},
            )
            written.append(path)
        return written
