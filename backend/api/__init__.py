"""API routes package."""

from .routes import assets, session

__all__ = ["assets", "session"]
