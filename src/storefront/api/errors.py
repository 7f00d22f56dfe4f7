"""Exception handlers mapping domain errors onto HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected invalid request", path=request.url.path, errors=exc.messages)
    return JSONResponse(status_code=400, content={"errors": exc.messages})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    # ObjectNotFoundError carries a plain message, not a field map
    return JSONResponse(status_code=404, content={"errors": [str(exc)]})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
