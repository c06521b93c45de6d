"""Docsite - static build configuration for the documentation site.

Resolves directory roles, passthrough assets, syntax highlighting and the
language table, then builds the site with Jinja2 and Python-Markdown.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
