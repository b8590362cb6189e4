"""worldbanc FastAPI application factory."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from worldbanc import __version__
from worldbanc.config import settings
from worldbanc.services.network import get_global_ip, get_local_ip

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    _setup_logging()
    await _log_startup_banner()
    logger.info("worldbanc v%s started, listening on %s:%s", __version__, settings.host, settings.port)
    try:
        yield
    finally:
        logger.info("worldbanc shutting down")


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def _log_startup_banner() -> None:
    """Print where the server can be reached, one aligned row per address."""
    local_ip = get_local_ip()
    global_ip = await get_global_ip()
    labels = ("WORLD_BANC_TOKEN", "WORLD_BANC_PORT", local_ip, global_ip, "WORLD_BANC_DDNS")
    width = max(len(label) for label in labels)
    port = settings.port

    logger.info("Settings :")
    logger.info("  OS        [%s]", sys.platform)
    logger.info("  Token     [%s] : [%s]", "WORLD_BANC_TOKEN".ljust(width), settings.token)
    logger.info("  Port      [%s] : [%s]", "WORLD_BANC_PORT".ljust(width), port)
    logger.info("  Local IP  [%s] : http://%s:%s/", local_ip.ljust(width), local_ip, port)
    logger.info("  Global IP [%s] : http://%s:%s/", global_ip.ljust(width), global_ip, port)
    logger.info("  DDNS      [%s] : http://%s:%s/", "WORLD_BANC_DDNS".ljust(width), settings.ddns, port)


def create_app() -> FastAPI:
    """Application factory."""
    from worldbanc.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(api_router)
    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "worldbanc.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
