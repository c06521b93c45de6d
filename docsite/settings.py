from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DOCSITE_", case_sensitive=False)

    root: Path = Path(".")
    variant: str = "i18n"
    verbose: bool = False
