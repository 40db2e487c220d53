"""API route modules."""

from . import assets, session

__all__ = ["assets", "session"]
