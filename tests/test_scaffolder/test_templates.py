"""Tests for the Jinja2 template renderer and its filters."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitegen.catalog import STATIC_PAGES, resolve_locales
from sitegen.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def make_renderer(tmp_path: Path):
    """Factory for a renderer over a single inline template named ``t.j2``."""

    def factory(source: str) -> TemplateRenderer:
        template_dir = tmp_path / "tpl"
        template_dir.mkdir(exist_ok=True)
        (template_dir / "t.j2").write_text(source, encoding="utf-8")
        return TemplateRenderer(template_dir)

    return factory


class TestDelimiters:
    def test_nunjucks_syntax_passes_through(self, renderer):
        footer = renderer.render("partials/footer.njk.j2", {})
        assert "{% year %}" in footer
        assert "{{ site.name }}" in footer

    def test_blocks_and_variables(self, renderer):
        about = STATIC_PAGES[1]
        locale = resolve_locales(["Spanish"])[1]

        plain = renderer.render("pages/page.njk.j2", {"page": about, "locale": None})
        localized = renderer.render("pages/page.njk.j2", {"page": about, "locale": locale})

        assert plain.startswith('---\nlayout: layouts/base.njk\ntitle: "About Us"\n---\n')
        assert "locale: es\n" in localized

    def test_comments_are_dropped(self, make_renderer):
        assert make_renderer("a<# hidden #>b").render("t.j2", {}) == "ab"


class TestFilters:
    def test_js_string(self, make_renderer):
        renderer = make_renderer("<< v | js_string >>")
        assert renderer.render("t.j2", {"v": 'Say "hi"'}) == '"Say \\"hi\\""'

    def test_js_string_keeps_unicode(self, make_renderer):
        assert make_renderer("<< v | js_string >>").render("t.j2", {"v": "Início"}) == '"Início"'

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "true"),
            (False, "false"),
            (3, "3"),
            (49.99, "49.99"),
            (None, "null"),
            ("2024-01-01", '"2024-01-01"'),
            (["a", "b"], '["a", "b"]'),
        ],
    )
    def test_yaml_value(self, make_renderer, value, expected):
        assert make_renderer("<< v | yaml_value >>").render("t.j2", {"v": value}) == expected


class TestFiles:
    @pytest.mark.asyncio
    async def test_render_to_file_creates_parents(self, make_renderer, tmp_path: Path):
        renderer = make_renderer("Hello << name >>\n")

        out = await renderer.render_to_file("t.j2", tmp_path / "out" / "hello.txt", {"name": "you"})

        assert out.read_text(encoding="utf-8") == "Hello you\n"

    def test_admin_title_is_escaped(self, renderer):
        html = renderer.render("cms/admin_index.html.j2", {"project_name": "Tom & <Jerry>"})
        assert "<title>Content Manager | Tom &amp; &lt;Jerry&gt;</title>" in html
