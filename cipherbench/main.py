import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cipherbench.api.v1.router import api_router
from cipherbench.core.config import get_settings
from cipherbench.core.logging import configure_logging
from cipherbench.services.engines.registry import EngineRegistry

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    logger.info(
        "Starting %s with engines: %s",
        settings.app_name,
        ", ".join(t.value for t in EngineRegistry.list_registered()),
    )
    yield
    # Shutdown


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(
        "DEBUG" if settings.debug else settings.log_level,
        json_logs=settings.json_logs,
    )

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical cipher workbench API. "
            "Encrypt and decrypt text with a modular alphabet substitution "
            "cipher and a table route transposition cipher."
        ),
        version="0.1.0",
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
        "cipherbench.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
