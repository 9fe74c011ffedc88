import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filemorph import __version__
from filemorph.api.v1.router import api_router
from filemorph.core.config import get_settings
from filemorph.services.engines.registry import EngineRegistry

settings = get_settings()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    logger.info("%s %s started", settings.app_name, __version__)
    logger.info(
        "Supported ciphers: %s",
        ", ".join(cipher_type.value for cipher_type in EngineRegistry.list_registered()),
    )
    yield
    # Shutdown
    logger.info("%s shutting down", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical cipher API. Encode and decode text with the shift, "
            "grid substitution, zigzag transposition and keyed columnar ciphers."
        ),
        version=__version__,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "filemorph.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
