"""Errors raised by the site engine during validation and build."""

from __future__ import annotations

from pathlib import Path


class BuildError(RuntimeError):
    """Base class for failures that abort a build."""


class ConfigValidationError(BuildError, ValueError):
    """Raised when an EngineConfig is rejected at build start."""


class UnknownTemplateEngineError(ConfigValidationError):
    """Raised when a config names a template engine that is not registered."""

    def __init__(self, field: str, engine_name: str, supported: list[str]) -> None:
        self.field = field
        self.engine_name = engine_name
        super().__init__(
            f"{field} references unknown template engine {engine_name!r}. "
            f"Supported: {', '.join(supported)}."
        )


class PassthroughNotFoundError(BuildError, FileNotFoundError):
    """Raised when a passthrough source does not exist."""

    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f"Passthrough source not found: {source}")


class TemplateRenderError(BuildError):
    """Raised when a template cannot be parsed or rendered."""

    def __init__(self, template_path: Path, message: str) -> None:
        self.template_path = template_path
        super().__init__(f"{template_path}: {message}")


class LayoutNotFoundError(TemplateRenderError):
    """Raised when front matter names a layout that does not exist."""


class DuplicateOutputError(TemplateRenderError):
    """Raised when two templates map to the same output file."""
