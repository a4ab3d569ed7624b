# mediaforge/services/api/app.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediaforge.common.logging import configure_logging, get_logger
from mediaforge.common.settings import get_settings
from mediaforge.services.api.errors import register_exception_handlers
from mediaforge.services.api.routers import health, media

logger = get_logger()


def create_app() -> FastAPI:
    cfg = get_settings()
    configure_logging(cfg.log_level)

    app = FastAPI(
        title="Mediaforge API",
        version=cfg.app_version,
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.api.cors_allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(media.router)
    app.include_router(health.router)

    logger.info("Media base directory: %s", cfg.base_dir)
    return app


app = create_app()
