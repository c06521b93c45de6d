"""Build configuration for the documentation site.

Two variants are provided. ``minimal`` copies stylesheets and images and
enables syntax highlighting. ``i18n`` additionally copies scripts and the
favicon and publishes the supported language table to every template under
the ``languages`` key.
"""

from __future__ import annotations

from collections.abc import Callable

from ..core.models import DirectoryMap, EngineConfig
from ..engine.site import SiteEngine
from ..plugins import syntax_highlight
from .builder import ConfigBuilder
from .languages import LANGUAGES

TEMPLATE_ENGINE = "njk"

DIRECTORIES = DirectoryMap(
    input="src",
    output="_site",
    includes="_includes",
    layouts="_layouts",
)

MINIMAL_PASSTHROUGH = ("src/css", "src/images")
I18N_PASSTHROUGH = (*MINIMAL_PASSTHROUGH, "src/js", "src/favicon.ico")


def engine_config() -> EngineConfig:
    return EngineConfig(
        dir=DIRECTORIES,
        markdown_template_engine=TEMPLATE_ENGINE,
        html_template_engine=TEMPLATE_ENGINE,
    )


def minimal_registrations() -> ConfigBuilder:
    return ConfigBuilder().plugin(syntax_highlight).passthrough(*MINIMAL_PASSTHROUGH)


def i18n_registrations() -> ConfigBuilder:
    return (
        ConfigBuilder()
        .plugin(syntax_highlight)
        .passthrough(*I18N_PASSTHROUGH)
        .global_data("languages", LANGUAGES)
    )


def resolve_minimal(engine: SiteEngine) -> EngineConfig:
    """Register highlighting and asset passthrough, then return the config."""
    minimal_registrations().apply(engine)
    return engine_config()


def resolve_i18n(engine: SiteEngine) -> EngineConfig:
    """Like :func:`resolve_minimal`, plus extra assets and the language table."""
    i18n_registrations().apply(engine)
    return engine_config()


Resolver = Callable[[SiteEngine], EngineConfig]

VARIANTS: dict[str, Resolver] = {
    "minimal": resolve_minimal,
    "i18n": resolve_i18n,
}

DEFAULT_VARIANT = "i18n"


def resolve(engine: SiteEngine, variant: str = DEFAULT_VARIANT) -> EngineConfig:
    """Run the named variant's registrations against ``engine``.

    Raises:
        KeyError: If ``variant`` is not a known variant name
    """
    return VARIANTS[variant](engine)
