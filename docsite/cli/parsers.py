"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer

from ..config import VARIANTS


def parse_variant(value: str) -> str:
    """Validate a configuration variant name."""
    if value not in VARIANTS:
        known = ", ".join(sorted(VARIANTS))
        raise typer.BadParameter(f"Unknown variant {value!r}. Choose one of: {known}")
    return value


def parse_root(value: str) -> Path:
    """Resolve the project root and ensure it is a directory."""
    root = Path(value).resolve()
    if not root.is_dir():
        raise typer.BadParameter(f"Project root is not a directory: {value!r}")
    return root
