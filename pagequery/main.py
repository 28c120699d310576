import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagequery import __version__
from pagequery.api.routes import audit_logs, health, inventory, notifications, posts, replies
from pagequery.core.config import get_settings
from pagequery.db import init_db
from pagequery.telemetry import configure_tracing, setup_prometheus


def create_app(*, create_tables: bool = True) -> FastAPI:
    settings = get_settings()

    # Basic structured logging to stdout for ops visibility
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = FastAPI(title=settings.app_name, version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if create_tables:
        @app.on_event("startup")
        def _startup() -> None:
            init_db()

    app.include_router(health.router)
    app.include_router(replies.router, prefix=settings.api_prefix)
    app.include_router(posts.router, prefix=settings.api_prefix)
    app.include_router(audit_logs.router, prefix=settings.api_prefix)
    app.include_router(notifications.router, prefix=settings.api_prefix)
    app.include_router(inventory.router, prefix=settings.api_prefix)

    if settings.enable_prometheus_metrics:
        setup_prometheus(app)
    configure_tracing(app)

    return app


app = create_app()
