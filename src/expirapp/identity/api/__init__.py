"""Identity context API package."""

from expirapp.identity.api.routes import router

__all__ = ["router"]
