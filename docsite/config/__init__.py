"""Site build configuration."""

from .builder import ConfigBuilder
from .languages import LANGUAGES
from .site import DEFAULT_VARIANT, VARIANTS, resolve, resolve_i18n, resolve_minimal

__all__ = [
    "ConfigBuilder",
    "DEFAULT_VARIANT",
    "LANGUAGES",
    "VARIANTS",
    "resolve",
    "resolve_i18n",
    "resolve_minimal",
]
