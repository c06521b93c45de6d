from pathlib import Path

import pytest
from conftest import write
from docsite.core.errors import TemplateRenderError
from docsite.core.models import DirectoryMap, EngineConfig
from docsite.rendering.context import RenderContext
from docsite.rendering.pages import discover_templates, load_page


@pytest.fixture
def ctx(tmp_path: Path) -> RenderContext:
    config = EngineConfig(dir=DirectoryMap(input="src", output="_site"))
    return RenderContext(config=config, root=tmp_path)


class TestDiscovery:
    def test_only_configured_formats_are_discovered(self, ctx: RenderContext):
        src = ctx.input_root
        write(src / "index.md", "")
        write(src / "about.html", "")
        write(src / "feed.njk", "")
        write(src / "notes.txt", "")
        write(src / "style.css", "")

        found = discover_templates(ctx, [])

        assert [p.name for p in found] == ["about.html", "feed.njk", "index.md"]

    def test_reserved_directories_are_skipped(self, ctx: RenderContext):
        src = ctx.input_root
        write(src / "_includes/nav.njk", "")
        write(src / "_layouts/base.njk", "")
        write(src / "_data/site.yaml", "")
        write(src / ".drafts/wip.md", "")
        write(src / "docs/guide.md", "")
        write(src / "vendor/widget.html", "")

        found = discover_templates(ctx, [src / "vendor"])

        assert found == [src / "docs/guide.md"]

    def test_missing_input_directory_yields_nothing(self, ctx: RenderContext):
        assert discover_templates(ctx, []) == []


class TestOutputPaths:
    @pytest.mark.parametrize(
        "source, output, url",
        [
            ("index.md", "index.html", "/"),
            ("about.html", "about/index.html", "/about/"),
            ("docs/index.njk", "docs/index.html", "/docs/"),
            ("docs/guide.md", "docs/guide/index.html", "/docs/guide/"),
        ],
    )
    def test_pretty_urls(self, ctx: RenderContext, source, output, url):
        path = write(ctx.input_root / source, "content")

        page = load_page(path, ctx)

        assert page.output == ctx.output_root / output
        assert page.url == url
        assert page.body == "content"

    @pytest.mark.parametrize(
        "permalink, output, url",
        [
            ("/feed.xml", "feed.xml", "/feed.xml"),
            ("/docs/start/", "docs/start/index.html", "/docs/start/"),
            ("/", "index.html", "/"),
        ],
    )
    def test_permalink_overrides_output(self, ctx: RenderContext, permalink, output, url):
        path = write(ctx.input_root / "page.njk", f"---\npermalink: {permalink}\n---\n")

        page = load_page(path, ctx)

        assert page.output == ctx.output_root / output
        assert page.url == url

    def test_permalink_false_skips_output(self, ctx: RenderContext):
        path = write(ctx.input_root / "partial.md", "---\npermalink: false\n---\nx")

        page = load_page(path, ctx)

        assert page.output is None
        assert page.url is None
        assert page.front_matter == {"permalink": False}

    @pytest.mark.parametrize("permalink", ["../../escaped.html", "/../outside/"])
    def test_permalink_cannot_leave_output_root(self, ctx: RenderContext, permalink):
        path = write(ctx.input_root / "page.njk", f"---\npermalink: {permalink}\n---\n")

        with pytest.raises(TemplateRenderError, match="outside"):
            load_page(path, ctx)

    def test_permalink_may_climb_within_output_root(self, ctx: RenderContext):
        path = write(ctx.input_root / "page.njk", "---\npermalink: a/../b.html\n---\n")

        page = load_page(path, ctx)

        assert page.output.resolve() == (ctx.output_root / "b.html").resolve()
