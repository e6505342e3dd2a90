"""FastAPI application factory: routers, CORS and domain error mapping."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.infrastructure import bootstrap
from storefront.infrastructure.api import cart_routes, product_routes, realtime
from storefront.infrastructure.api.responses import StrictJSONResponse
from storefront.infrastructure.bootstrap import Container


async def _validation_error(request: Request, exc: ValidationError) -> StrictJSONResponse:
    logger.info("{} {} rejected: {}", request.method, request.url.path, exc)
    return StrictJSONResponse(status_code=400, content={"error": str(exc)})


async def _not_found(request: Request, exc: EntityNotFoundError) -> StrictJSONResponse:
    return StrictJSONResponse(status_code=404, content={"error": str(exc)})


def create_app(container: Container | None = None) -> FastAPI:
    """Build the HTTP app around *container* (the process one by default)."""
    app = FastAPI(title="Storefront API", default_response_class=StrictJSONResponse)
    app.state.container = container or bootstrap.container()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(EntityNotFoundError, _not_found)

    app.include_router(product_routes.router)
    app.include_router(cart_routes.router)
    app.include_router(realtime.router)
    return app
