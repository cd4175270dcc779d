"""Payments context API package."""

from expirapp.payments.api.routes import method_router, payment_router

__all__ = ["payment_router", "method_router"]
