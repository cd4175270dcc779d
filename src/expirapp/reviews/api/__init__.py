"""Reviews context API package."""

from expirapp.reviews.api.routes import router

__all__ = ["router"]
