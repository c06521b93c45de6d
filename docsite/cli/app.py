"""Main CLI application."""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..config import resolve
from ..core.errors import BuildError
from ..engine import SiteEngine
from ..settings import Settings
from .parsers import parse_root, parse_variant

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="docsite",
    help="Build the documentation site from its Jinja2 and Markdown sources.",
)

VariantOption = Annotated[
    Optional[str],
    typer.Option(
        "--variant",
        help=(
            "Configuration variant: minimal or i18n "
            "(default: $DOCSITE_VARIANT or i18n)."
        ),
        metavar="NAME",
    ),
]
RootOption = Annotated[
    Optional[str],
    typer.Option(
        "--root",
        help=(
            "Project root containing the input directory "
            "(default: $DOCSITE_ROOT or cwd)."
        ),
        metavar="DIR",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _engine_and_variant(
    settings: Settings, variant: str | None, root: str | None
) -> tuple[SiteEngine, str]:
    engine = SiteEngine(parse_root(root or str(settings.root)))
    return engine, parse_variant(variant or settings.variant)


@app.command()
def build(
    variant: VariantOption = None,
    root: RootOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Resolve the site configuration and build the site."""
    settings = Settings()
    _configure_logging(verbose or settings.verbose)

    engine, variant_name = _engine_and_variant(settings, variant, root)
    logger.debug(f"Resolving '{variant_name}' configuration in {engine.root}")
    config = resolve(engine, variant_name)

    try:
        result = engine.build(config)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        raise typer.Exit(code=1) from e

    logger.debug(
        f"Completed: {len(result.copied)} copied, {len(result.rendered)} rendered"
    )


@app.command("config")
def show_config(
    variant: VariantOption = None,
    root: RootOption = None,
) -> None:
    """Print the resolved configuration and registrations as JSON."""
    settings = Settings()
    engine, variant_name = _engine_and_variant(settings, variant, root)
    config = resolve(engine, variant_name)

    payload = {
        "variant": variant_name,
        **config.model_dump(mode="json", by_alias=True),
        "plugins": list(engine.plugins),
        "passthrough": [rule.source for rule in engine.passthrough_rules],
        "globalData": sorted(engine.global_data),
    }
    typer.echo(json.dumps(payload, indent=2))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
