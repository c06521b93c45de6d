"""Site engine: the registration surface and build lifecycle."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from ..core.errors import PassthroughNotFoundError
from ..core.models import EngineConfig, PassthroughRule
from ..rendering import engine as rendering
from ..rendering.context import RenderContext, freeze
from ..rendering.io import copy_verbatim
from ..rendering.pages import discover_templates, load_page
from .data import load_data_dir
from .validate import validate_engine_config

logger = logging.getLogger(__name__)


class Plugin(Protocol):
    """A callable that configures the engine it is registered with."""

    def __call__(self, engine: SiteEngine, **options: Any) -> None: ...


@dataclass(frozen=True)
class BuildResult:
    """Files produced by a build."""

    copied: tuple[Path, ...]
    rendered: tuple[Path, ...]


class SiteEngine:
    """Collects registrations, then builds a site from an EngineConfig.

    Registrations (plugins, passthrough rules, global data) are accepted until
    :meth:`build` is called. The build freezes them into a
    :class:`RenderContext` before any template is rendered.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else Path.cwd()
        self._plugins: list[str] = []
        self._passthrough: list[PassthroughRule] = []
        self._global_data: dict[str, Any] = {}
        self._filters: dict[str, Callable[..., Any]] = {}
        self._markdown_extensions: list[str] = []
        self._markdown_extension_configs: dict[str, dict[str, Any]] = {}

    @property
    def plugins(self) -> tuple[str, ...]:
        return tuple(self._plugins)

    @property
    def passthrough_rules(self) -> tuple[PassthroughRule, ...]:
        return tuple(self._passthrough)

    @property
    def global_data(self) -> dict[str, Any]:
        return dict(self._global_data)

    @property
    def filters(self) -> dict[str, Callable[..., Any]]:
        return dict(self._filters)

    @property
    def markdown_extensions(self) -> tuple[str, ...]:
        return tuple(self._markdown_extensions)

    def add_plugin(self, plugin: Plugin, **options: Any) -> None:
        name = getattr(plugin, "__name__", type(plugin).__name__)
        if name in self._plugins:
            logger.debug(f"Plugin already registered: {name}")
            return
        logger.debug(f"Registering plugin: {name}")
        plugin(self, **options)
        self._plugins.append(name)

    def add_passthrough_copy(self, path: str) -> None:
        rule = PassthroughRule(source=path)
        if rule in self._passthrough:
            logger.debug(f"Passthrough already registered: {path}")
            return
        self._passthrough.append(rule)
        logger.debug(f"Registered passthrough copy: {path}")

    def add_global_data(self, key: str, value: Any) -> None:
        if key in self._global_data:
            logger.debug(f"Replacing global data key: {key}")
        self._global_data[key] = value

    def add_filter(self, name: str, func: Callable[..., Any]) -> None:
        self._filters[name] = func

    def add_markdown_extension(
        self, name: str, config: dict[str, Any] | None = None
    ) -> None:
        if name not in self._markdown_extensions:
            self._markdown_extensions.append(name)
        if config:
            self._markdown_extension_configs.setdefault(name, {}).update(config)

    def render_context(self, config: EngineConfig) -> RenderContext:
        """Freeze current registrations into a build-scoped render context.

        Data files from the data directory override registered global data of
        the same key.
        """
        ctx = RenderContext(config=config, root=self.root)
        global_data = {**self._global_data, **load_data_dir(ctx.data_root)}
        return RenderContext(
            config=config,
            root=self.root,
            global_data=freeze(global_data),
            filters=freeze(self._filters),
            markdown_extensions=tuple(self._markdown_extensions),
            markdown_extension_configs=freeze(
                {k: freeze(v) for k, v in self._markdown_extension_configs.items()}
            ),
        )

    def copy_passthrough(self, config: EngineConfig) -> list[Path]:
        """Copy every passthrough rule into the output tree in order."""
        copied: list[Path] = []
        for rule in self._passthrough:
            source = self.root / rule.source
            if not source.exists():
                raise PassthroughNotFoundError(source)
            destination = self.root / rule.destination(config.dir)
            files = copy_verbatim(source, destination)
            logger.info(f"Copied {rule.source} → {destination} ({len(files)} file(s))")
            copied.extend(files)
        return copied

    def build(self, config: EngineConfig) -> BuildResult:
        """Validate, load pages, copy passthrough assets, then render templates.

        Raises:
            BuildError: If validation, copying or rendering fails
        """
        validate_engine_config(config, rendering.SUPPORTED_ENGINES)
        ctx = self.render_context(config)

        passthrough_sources = [self.root / rule.source for rule in self._passthrough]
        pages = [
            load_page(path, ctx)
            for path in discover_templates(ctx, passthrough_sources)
        ]
        rendering.check_unique_outputs(pages)

        copied = self.copy_passthrough(config)
        rendered = rendering.render_all(pages, ctx)

        logger.info(
            f"Build complete: {len(copied)} copied, {len(rendered)} rendered "
            f"into {ctx.output_root}"
        )
        return BuildResult(copied=tuple(copied), rendered=tuple(rendered))
