"""Core domain models."""

from .models import (
    DirectoryMap,
    EngineConfig,
    LanguageCode,
    LanguageDescriptor,
    LanguageTable,
    PassthroughRule,
    TextDirection,
)

__all__ = [
    "DirectoryMap",
    "EngineConfig",
    "LanguageCode",
    "LanguageDescriptor",
    "LanguageTable",
    "PassthroughRule",
    "TextDirection",
]
