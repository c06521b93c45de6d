"""Languages the documentation site is published in."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..core.models import LanguageDescriptor, LanguageTable

_LANGUAGES = {
    "en": {"name": "English", "dir": "ltr", "native": "English"},
    "es": {"name": "Spanish", "dir": "ltr", "native": "Español"},
    "fr": {"name": "French", "dir": "ltr", "native": "Français"},
    "de": {"name": "German", "dir": "ltr", "native": "Deutsch"},
    "it": {"name": "Italian", "dir": "ltr", "native": "Italiano"},
    "pt-BR": {
        "name": "Portuguese (Brazil)",
        "dir": "ltr",
        "native": "Português (Brasil)",
    },
    "nl": {"name": "Dutch", "dir": "ltr", "native": "Nederlands"},
    "pl": {"name": "Polish", "dir": "ltr", "native": "Polski"},
    "ru": {"name": "Russian", "dir": "ltr", "native": "Русский"},
    "uk": {"name": "Ukrainian", "dir": "ltr", "native": "Українська"},
    "tr": {"name": "Turkish", "dir": "ltr", "native": "Türkçe"},
    "ar": {"name": "Arabic", "dir": "rtl", "native": "العربية"},
    "he": {"name": "Hebrew", "dir": "rtl", "native": "עברית"},
    "fa": {"name": "Persian", "dir": "rtl", "native": "فارسی"},
    "hi": {"name": "Hindi", "dir": "ltr", "native": "हिन्दी"},
    "ja": {"name": "Japanese", "dir": "ltr", "native": "日本語"},
    "ko": {"name": "Korean", "dir": "ltr", "native": "한국어"},
    "zh-CN": {"name": "Chinese (Simplified)", "dir": "ltr", "native": "简体中文"},
    "zh-TW": {"name": "Chinese (Traditional)", "dir": "ltr", "native": "繁體中文"},
}

LANGUAGES: Mapping[str, LanguageDescriptor] = MappingProxyType(
    LanguageTable.validate_python(_LANGUAGES)
)
