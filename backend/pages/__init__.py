"""Page rendering."""

from .renderer import PageRenderer, create_environment

__all__ = ["PageRenderer", "create_environment"]
