"""ExpirApp FastAPI application.

Commands are processed synchronously over HTTP. Every request runs inside the
commerce domain context, with a request id bound to the structlog context.

Usage:
    uvicorn expirapp.app:create_app --factory --host 0.0.0.0 --port 8000
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from expirapp.bootstrap import init_domain
from expirapp.domain import commerce
from expirapp.utils.logging import add_context, clear_context


def create_app(initialize: bool = True) -> FastAPI:
    """Build the application. Pass ``initialize=False`` when the domain is already initialized."""
    if initialize:
        init_domain()

    from expirapp.catalogue.api import product_router
    from expirapp.identity.api import router as user_router
    from expirapp.ordering.api import router as order_router
    from expirapp.payments.api import method_router, payment_router
    from expirapp.reviews.api import router as review_router

    app = FastAPI(
        title="ExpirApp API",
        description="Commerce administration for perishable goods",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the commerce domain context for each request."""
        clear_context()
        add_context(request_id=request.headers.get("x-request-id", str(uuid4())), path=request.url.path)
        with commerce.domain_context():
            response = await call_next(request)
        return response

    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(payment_router)
    app.include_router(method_router)
    app.include_router(review_router)
    app.include_router(user_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": commerce.name})

    return app
