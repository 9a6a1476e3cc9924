# errors.py - Excepciones propias y manejadores de excepción para FastAPI

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Fallo de la capa de persistencia (configuración o respuesta con error)."""


def register_exception_handlers(app: FastAPI) -> None:
    # StarletteHTTPException cubre también fastapi.HTTPException y los 404 de rutas
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )
