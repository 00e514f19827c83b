"""
Worlds Codex API Server

FastAPI application serving World Championship history and a chat
assistant backed by a completion API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.ai.llm.api_provider import get_provider
from src.ai.llm.config import LLMConfig
from src.worlds.errors import PublicError, GENERIC_DATA_ERROR, GENERIC_CHAT_ERROR
from .config import ServerConfig, configure_logging
from .models import HealthResponse
from .routes import worlds_router, static_router
from .services.worlds_service import WorldsService

logger = logging.getLogger(__name__)


# =============================================================================
# FastAPI Application
# =============================================================================

def create_app(
    service: Optional[WorldsService] = None,
    server_config: Optional[ServerConfig] = None,
    llm_config: Optional[LLMConfig] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Worlds service to use; built from llm_config when omitted
        server_config: Server settings; read from the environment when omitted
        llm_config: Completion API settings; read from the environment when omitted
    """
    server_config = server_config or ServerConfig.from_env()
    llm_config = llm_config or LLMConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        configure_logging(server_config.log_level)
        logger.info("Worlds Codex API Server starting...")
        if not llm_config.openai_key:
            logger.warning(
                "OPENAI_API_KEY is not set. API routes will fail until it is configured."
            )
        yield
        # Shutdown
        logger.info("Worlds Codex API Server shutting down...")

    app = FastAPI(
        title="Worlds Codex API",
        description="League of Legends World Championship history with a chat assistant",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.server_config = server_config
    app.state.worlds_service = service or WorldsService(
        provider=get_provider(llm_config),
        config=llm_config
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=server_config.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PublicError)
    async def public_error_handler(request: Request, exc: PublicError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        if request.url.path.endswith("/worlds-chat"):
            message = GENERIC_CHAT_ERROR
        else:
            message = GENERIC_DATA_ERROR
        return JSONResponse(status_code=500, content={"error": message})

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service="worlds-codex",
            cache=app.state.worlds_service.cache.get_stats()
        )

    # Mount routers; the static catch-all goes last
    app.include_router(worlds_router, prefix="/api")
    app.include_router(static_router)

    return app


# For running with uvicorn directly
app = create_app()


# Main entry point
if __name__ == "__main__":
    import uvicorn

    config = app.state.server_config
    uvicorn.run(
        "src.server.main:app",
        host=config.host,
        port=config.port
    )
