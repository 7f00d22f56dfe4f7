"""Storefront FastAPI application.

Serves the basket, checkout, order and catalog endpoints. Commands are
processed synchronously inside the storefront domain context pushed for
every request.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay ("test", "production", ...).
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.authentication import AuthenticationMiddleware
from storefront.domain import storefront  # noqa: E402
from storefront.identity.auth import TrustedHeaderBackend
from storefront.utils.logging import clear_request_context

storefront.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Baskets, checkout and orders for anonymous and signed-in shoppers",
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context for each request."""
    clear_request_context()
    with storefront.domain_context():
        response = await call_next(request)
    return response


# Added after the domain middleware so it runs first and request.user is set
app.add_middleware(AuthenticationMiddleware, backend=TrustedHeaderBackend())

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    basket_router,
    catalog_router,
    order_router,
    register_exception_handlers,
)

register_exception_handlers(app)
app.include_router(basket_router)
app.include_router(order_router)
app.include_router(catalog_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"storefront": {"name": storefront.name}},
        }
    )
