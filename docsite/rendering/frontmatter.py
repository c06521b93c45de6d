"""YAML front matter parsing."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import TemplateRenderError

_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.DOTALL | re.MULTILINE
)


def split_front_matter(text: str, source: Path) -> tuple[dict[str, Any], str]:
    """Split a template into its front matter data and body.

    Args:
        text: Raw template text
        source: Template path, used in error messages

    Returns:
        Tuple of (front matter mapping, remaining body)
    """
    match = _FRONT_MATTER.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as e:
        raise TemplateRenderError(source, f"Invalid front matter: {e}") from e

    if not isinstance(data, dict):
        raise TemplateRenderError(source, "Front matter must be a mapping")

    return data, text[match.end() :]


def read_template(path: Path) -> tuple[dict[str, Any], str]:
    """Read a template file and split off its front matter."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TemplateRenderError(path, f"Not valid UTF-8: {e}") from e
    return split_front_matter(text, path)
