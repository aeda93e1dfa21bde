"""API routes package."""

from . import profiles, crew

__all__ = ["profiles", "crew"]
