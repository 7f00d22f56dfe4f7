import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from starlette.middleware.authentication import AuthenticationMiddleware

from storefront.api import basket_router, catalog_router, order_router, register_exception_handlers
from storefront.domain import storefront
from storefront.identity.auth import TrustedHeaderBackend


@pytest.fixture()
def client():
    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with storefront.domain_context():
            return await call_next(request)

    app.add_middleware(AuthenticationMiddleware, backend=TrustedHeaderBackend())
    register_exception_handlers(app)
    app.include_router(basket_router)
    app.include_router(order_router)
    app.include_router(catalog_router)
    return TestClient(app)


@pytest.fixture()
def signed_in():
    def _headers(name="alice@example.com"):
        return {"X-Authenticated-User": name}

    return _headers
