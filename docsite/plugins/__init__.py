"""Engine plugins."""

from .highlight import syntax_highlight

__all__ = ["syntax_highlight"]
