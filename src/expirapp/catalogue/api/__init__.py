"""Catalogue context API package."""

from expirapp.catalogue.api.routes import product_router

__all__ = ["product_router"]
