# backend/inventory/main.py - Punto de entrada: logging, persistencia, siembra y servidor
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from inventory.core.settings import log_settings, settings
from inventory.repositories.items import ItemRepository, build_repository
from inventory.services.seeder import seed_items
from inventory.utils.errors import register_exception_handlers
from inventory.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(repository: Optional[ItemRepository] = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.repository = repository

    # Error handlers
    register_exception_handlers(app)

    # Health endpoints
    @app.api_route("/health", methods=["GET", "HEAD"])
    @app.api_route("/health/", methods=["GET", "HEAD"])
    def health_check(request: Request):
        return JSONResponse({
            "status": "ok",
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "storage_backend": settings.STORAGE_BACKEND,
            "repository_ready": request.app.state.repository is not None,
        })

    @app.get("/")
    def root_endpoint():
        return {"status": "ok", "message": f"{settings.PROJECT_NAME} running", "endpoints": ["/health"]}

    return app


def main() -> None:
    # 1) Logging
    setup_logging(settings.LOG_LEVEL)
    if settings.DEBUG or settings.LOG_CONFIG:
        log_settings()

    # 2) Persistencia
    repository = build_repository(settings)

    # 3) Siembra (una sola vez; si falla, el arranque aborta)
    seed_items(repository)

    # 4) Servidor
    if not settings.SERVE:
        logger.info("SERVE=false, exiting after seed")
        return

    logger.info("Starting %s on %s:%d", settings.PROJECT_NAME, settings.HOST, settings.PORT)
    uvicorn.run(
        create_app(repository),
        host=settings.HOST,
        port=settings.PORT,
        access_log=True,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
