"""Site engine."""

from .site import BuildResult, Plugin, SiteEngine

__all__ = ["BuildResult", "Plugin", "SiteEngine"]
