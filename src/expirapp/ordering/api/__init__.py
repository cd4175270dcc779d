"""Ordering context API package."""

from expirapp.ordering.api.routes import router

__all__ = ["router"]
