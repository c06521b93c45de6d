from pathlib import Path

from docsite.config.site import engine_config
from docsite.engine import SiteEngine
from docsite.plugins import syntax_highlight
from docsite.plugins.highlight import make_highlight_filter


def test_plugin_registers_markdown_extensions_and_filter(tmp_path: Path):
    engine = SiteEngine(tmp_path)

    engine.add_plugin(syntax_highlight)

    assert engine.markdown_extensions == ("fenced_code", "codehilite")
    assert "highlight" in engine.filters
    assert engine.plugins == ("syntax_highlight",)


def test_plugin_options_reach_codehilite(tmp_path: Path):
    engine = SiteEngine(tmp_path)
    engine.add_plugin(syntax_highlight, css_class="code")

    ctx = engine.render_context(engine_config())

    assert ctx.markdown_extension_configs["codehilite"]["css_class"] == "code"


def test_filter_highlights_known_language():
    highlight = make_highlight_filter()

    html = highlight("def greet():\n    pass\n", "python")

    assert html.startswith('<div class="highlight">')
    assert '<span class="k">def</span>' in html


def test_filter_falls_back_to_plain_text():
    html = make_highlight_filter("code")("<b>raw</b>", "no-such-language")

    assert html.startswith('<div class="code">')
    assert "&lt;b&gt;raw&lt;/b&gt;" in html


def test_registering_twice_runs_the_plugin_once(tmp_path: Path):
    calls = []

    def counting_plugin(engine):
        calls.append(engine)

    engine = SiteEngine(tmp_path)
    engine.add_plugin(counting_plugin)
    engine.add_plugin(counting_plugin)

    assert len(calls) == 1
    assert engine.plugins == ("counting_plugin",)
