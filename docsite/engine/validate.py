"""Build-start validation of an EngineConfig."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath

from ..core.errors import ConfigValidationError, UnknownTemplateEngineError
from ..core.models import DirectoryMap, EngineConfig

logger = logging.getLogger(__name__)


def _is_ancestor_or_same(candidate: PurePosixPath, path: PurePosixPath) -> bool:
    return candidate == path or candidate in path.parents


def validate_directories(dirs: DirectoryMap) -> None:
    """Ensure directory roles are non-empty, distinct and non-overlapping.

    Raises:
        ConfigValidationError: On the first violated constraint
    """
    roles = dirs.roles()

    empty = [role for role, value in roles.items() if not value.strip()]
    if empty:
        raise ConfigValidationError(
            f"Directory role(s) must not be empty: {', '.join(empty)}"
        )

    seen: dict[str, str] = {}
    for role, value in roles.items():
        normalized = PurePosixPath(value).as_posix()
        if normalized in seen:
            raise ConfigValidationError(
                f"Directory roles '{seen[normalized]}' and '{role}' "
                f"both resolve to {value!r}"
            )
        seen[normalized] = role

    output = PurePosixPath(dirs.output)
    if _is_ancestor_or_same(output, PurePosixPath(dirs.input)):
        raise ConfigValidationError(
            f"Output directory {dirs.output!r} must not contain input "
            f"directory {dirs.input!r}"
        )


def validate_engine_config(config: EngineConfig, supported: Iterable[str]) -> None:
    """Validate directory roles and template engine identifiers.

    Args:
        config: Resolved configuration
        supported: Template engine identifiers known to the engine
    """
    supported_names = sorted(supported)
    validate_directories(config.dir)

    for field in ("markdown_template_engine", "html_template_engine"):
        engine_name = getattr(config, field)
        if engine_name not in supported_names:
            raise UnknownTemplateEngineError(field, engine_name, supported_names)

    if not config.template_formats:
        raise ConfigValidationError("template_formats must not be empty")

    logger.debug(
        f"Validated config: input={config.dir.input} output={config.dir.output}"
    )
