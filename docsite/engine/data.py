"""Global data files loaded from the data directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import BuildError

logger = logging.getLogger(__name__)

_LOADERS = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}


def load_data_dir(data_root: Path) -> dict[str, Any]:
    """Load every JSON/YAML file in ``data_root`` keyed by file stem.

    Args:
        data_root: Directory to scan (non-recursive); may not exist

    Returns:
        Mapping of stem to parsed content
    """
    if not data_root.is_dir():
        return {}

    data: dict[str, Any] = {}
    for path in sorted(data_root.iterdir()):
        loader = _LOADERS.get(path.suffix.lower())
        if loader is None or not path.is_file():
            continue
        try:
            data[path.stem] = loader(path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise BuildError(f"Invalid data file {path}: {e}") from e
        logger.debug(f"Loaded global data '{path.stem}' from {path.name}")

    return data
