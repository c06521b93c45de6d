"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import markdown
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from markupsafe import Markup

from ..core.errors import (
    DuplicateOutputError,
    LayoutNotFoundError,
    TemplateRenderError,
)
from .context import RenderContext
from .frontmatter import read_template
from .io import atomic_write_text
from .pages import Page

logger = logging.getLogger(__name__)

NJK = "njk"
HTML = "html"
SUPPORTED_ENGINES = (NJK, HTML)

_LAYOUT_EXTENSIONS = ("njk", "html", "md")


def create_environment(ctx: RenderContext) -> Environment:
    """Create the Jinja2 environment that serves the ``njk`` engine.

    Output is autoescaped; layouts receive ``content`` already marked safe.

    Args:
        ctx: Build render context

    Returns:
        Environment searching includes, layouts, then the input root
    """
    loader = FileSystemLoader(
        [str(ctx.includes_root), str(ctx.layouts_root), str(ctx.input_root)]
    )
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters.update(ctx.filters)
    return env


def _render_string(
    env: Environment, body: str, data: dict[str, Any], source: Path
) -> str:
    try:
        return env.from_string(body).render(**data)
    except TemplateError as e:
        raise TemplateRenderError(source, str(e)) from e


def _convert_markdown(text: str, ctx: RenderContext) -> str:
    return markdown.markdown(
        text,
        extensions=list(ctx.markdown_extensions),
        extension_configs={
            name: dict(options)
            for name, options in ctx.markdown_extension_configs.items()
        },
        output_format="html",
    )


def render_body(
    body: str,
    source: Path,
    data: dict[str, Any],
    env: Environment,
    ctx: RenderContext,
) -> str:
    """Render a template body according to its file extension.

    Markdown is preprocessed by the configured markdown template engine before
    conversion; HTML by the configured HTML template engine.
    """
    extension = source.suffix.lstrip(".")

    if extension == "md":
        if ctx.config.markdown_template_engine == NJK:
            body = _render_string(env, body, data, source)
        return _convert_markdown(body, ctx)

    if extension == "html":
        if ctx.config.html_template_engine == NJK:
            return _render_string(env, body, data, source)
        return body

    return _render_string(env, body, data, source)


def find_layout(name: str, ctx: RenderContext, referrer: Path) -> Path:
    """Locate a layout by name, with or without its extension."""
    candidate = ctx.layouts_root / name
    if candidate.is_file():
        return candidate

    if not candidate.suffix:
        for extension in _LAYOUT_EXTENSIONS:
            with_extension = candidate.with_name(f"{candidate.name}.{extension}")
            if with_extension.is_file():
                return with_extension

    raise LayoutNotFoundError(referrer, f"Layout not found: {name!r}")


def apply_layouts(
    content: str,
    data: dict[str, Any],
    source: Path,
    env: Environment,
    ctx: RenderContext,
) -> str:
    """Wrap rendered content in its layout chain.

    Each layout receives the page output as ``content``, marked safe so it is
    not escaped again. Layout front matter
    provides defaults that page data overrides.
    """
    layout_name = data.get("layout")
    seen: set[Path] = set()

    while layout_name:
        layout_path = find_layout(str(layout_name), ctx, source)
        if layout_path in seen:
            raise TemplateRenderError(
                source, f"Layout cycle detected at {layout_path.name}"
            )
        seen.add(layout_path)

        layout_data, layout_body = read_template(layout_path)
        data = {**layout_data, **data, "content": Markup(content)}
        data.pop("layout", None)

        logger.debug(f"Applying layout {layout_path.name} to {source}")
        content = render_body(layout_body, layout_path, data, env, ctx)
        layout_name = layout_data.get("layout")

    return content


def page_data(page: Page, ctx: RenderContext) -> dict[str, Any]:
    """Assemble template variables for one page."""
    return {
        **ctx.global_data,
        **page.front_matter,
        "page": {
            "url": page.url,
            "input_path": page.source.relative_to(ctx.root).as_posix(),
            "output_path": (
                page.output.relative_to(ctx.root).as_posix() if page.output else None
            ),
        },
    }


def render_page(page: Page, env: Environment, ctx: RenderContext) -> str:
    """Render a page, including its layouts, to a string."""
    data = page_data(page, ctx)
    content = render_body(page.body, page.source, data, env, ctx)
    return apply_layouts(content, data, page.source, env, ctx)


def check_unique_outputs(pages: list[Page]) -> None:
    """Reject builds where two templates would write the same output file."""
    claimed: dict[Path, Path] = {}
    for page in pages:
        if page.output is None:
            continue
        previous = claimed.setdefault(page.output, page.source)
        if previous != page.source:
            raise DuplicateOutputError(
                page.source,
                f"Output {page.output} is also written by {previous}",
            )


def render_all(
    pages: list[Page], ctx: RenderContext, file_mode: int = 0o644
) -> list[Path]:
    """Render pages and write them to the output tree.

    Args:
        pages: Pages to render
        ctx: Build render context
        file_mode: File permissions

    Returns:
        List of output file paths
    """
    logger.info(f"Rendering {len(pages)} template(s)")
    check_unique_outputs(pages)
    env = create_environment(ctx)

    outputs = []
    for page in pages:
        rendered = render_page(page, env, ctx)
        if page.output is None:
            logger.debug(f"Skipped write for {page.source} (permalink: false)")
            continue
        atomic_write_text(page.output, rendered, mode=file_mode)
        logger.info(f"Rendered {page.source} → {page.output}")
        outputs.append(page.output)

    logger.info(f"Successfully rendered {len(outputs)} file(s)")
    return outputs
