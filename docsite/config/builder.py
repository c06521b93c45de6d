"""Ordered registration intents applied to a site engine."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ..engine.site import Plugin, SiteEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginRegistration:
    plugin: Plugin
    options: Mapping[str, Any] = field(default_factory=dict)

    def apply(self, engine: SiteEngine) -> None:
        engine.add_plugin(self.plugin, **self.options)


@dataclass(frozen=True)
class PassthroughRegistration:
    path: str

    def apply(self, engine: SiteEngine) -> None:
        engine.add_passthrough_copy(self.path)


@dataclass(frozen=True)
class GlobalDataRegistration:
    key: str
    value: Any

    def apply(self, engine: SiteEngine) -> None:
        engine.add_global_data(self.key, self.value)


Registration = Union[
    PluginRegistration, PassthroughRegistration, GlobalDataRegistration
]


class ConfigBuilder:
    """Accumulates registrations and replays them in insertion order."""

    def __init__(self) -> None:
        self._registrations: list[Registration] = []

    @property
    def registrations(self) -> tuple[Registration, ...]:
        return tuple(self._registrations)

    def plugin(self, plugin: Plugin, **options: Any) -> ConfigBuilder:
        self._registrations.append(PluginRegistration(plugin, options))
        return self

    def passthrough(self, *paths: str) -> ConfigBuilder:
        for path in paths:
            self._registrations.append(PassthroughRegistration(path))
        return self

    def global_data(self, key: str, value: Any) -> ConfigBuilder:
        self._registrations.append(GlobalDataRegistration(key, value))
        return self

    def apply(self, engine: SiteEngine) -> None:
        """Apply every registration to ``engine``, in the order they were added."""
        logger.debug(f"Applying {len(self._registrations)} registration(s)")
        for registration in self._registrations:
            registration.apply(engine)
