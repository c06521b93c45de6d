"""Template discovery and output path mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any

from ..core.errors import TemplateRenderError
from .context import RenderContext
from .frontmatter import read_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """A source template and where its rendered output goes."""

    source: Path
    output: Path | None
    url: str | None
    front_matter: dict[str, Any] = field(default_factory=dict)
    body: str = ""

    @property
    def extension(self) -> str:
        return self.source.suffix.lstrip(".")


def _is_within(path: Path, roots: Iterable[Path]) -> bool:
    return any(path == root or root in path.parents for root in roots)


def discover_templates(ctx: RenderContext, passthrough: Iterable[Path]) -> list[Path]:
    """List renderable templates under the input directory.

    Skips the includes, layouts and data directories, passthrough sources, the
    output directory, hidden paths and files whose extension is not a
    configured template format.

    Args:
        ctx: Build render context
        passthrough: Absolute passthrough source paths

    Returns:
        Sorted template paths
    """
    input_root = ctx.input_root
    if not input_root.is_dir():
        return []

    excluded = [
        ctx.includes_root,
        ctx.layouts_root,
        ctx.data_root,
        ctx.output_root,
        *passthrough,
    ]
    formats = set(ctx.config.template_formats)

    templates = []
    for path in sorted(input_root.rglob("*")):
        if not path.is_file():
            continue
        relative = path.relative_to(input_root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if _is_within(path, excluded):
            continue
        if path.suffix.lstrip(".") not in formats:
            continue
        templates.append(path)

    logger.debug(f"Discovered {len(templates)} template(s) under {input_root}")
    return templates


def _output_from_permalink(permalink: str) -> PurePosixPath:
    relative = permalink.lstrip("/")
    if not relative or relative.endswith("/"):
        relative = f"{relative}index.html"
    return PurePosixPath(relative)


def _default_output(relative_source: PurePosixPath) -> PurePosixPath:
    parent = relative_source.parent
    if relative_source.stem == "index":
        return parent / "index.html"
    return parent / relative_source.stem / "index.html"


def _url_for(relative_output: PurePosixPath) -> str:
    if relative_output.name == "index.html":
        parent = relative_output.parent.as_posix()
        return "/" if parent == "." else f"/{parent}/"
    return f"/{relative_output.as_posix()}"


def load_page(source: Path, ctx: RenderContext) -> Page:
    """Read a template and compute its output location.

    ``permalink: false`` in front matter renders nothing to disk.
    """
    front_matter, body = read_template(source)
    relative_source = PurePosixPath(source.relative_to(ctx.input_root).as_posix())

    permalink = front_matter.get("permalink")
    if permalink is False:
        return Page(source, None, None, front_matter, body)

    if isinstance(permalink, str):
        relative_output = _output_from_permalink(permalink)
    else:
        relative_output = _default_output(relative_source)

    output = ctx.output_root / relative_output
    output_root = ctx.output_root.resolve()
    if output_root not in output.resolve().parents:
        raise TemplateRenderError(
            source, f"Permalink {permalink!r} resolves outside {ctx.output_root}"
        )

    return Page(
        source=source,
        output=output,
        url=_url_for(relative_output),
        front_matter=front_matter,
        body=body,
    )
