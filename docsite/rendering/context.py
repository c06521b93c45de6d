"""Read-only state handed to every render call of a build."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ..core.models import EngineConfig


def freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class RenderContext:
    """Build-scoped render state.

    Created once when a build starts, after all registrations have run, and
    passed explicitly to each render function.
    """

    config: EngineConfig
    root: Path
    global_data: Mapping[str, Any] = field(default_factory=lambda: freeze({}))
    filters: Mapping[str, Callable[..., Any]] = field(
        default_factory=lambda: freeze({})
    )
    markdown_extensions: tuple[str, ...] = ()
    markdown_extension_configs: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: freeze({})
    )

    @property
    def input_root(self) -> Path:
        return self.root / self.config.dir.input

    @property
    def output_root(self) -> Path:
        return self.root / self.config.dir.output

    @property
    def includes_root(self) -> Path:
        return self.input_root / self.config.dir.includes

    @property
    def layouts_root(self) -> Path:
        return self.input_root / self.config.dir.layouts

    @property
    def data_root(self) -> Path:
        return self.input_root / self.config.dir.data
