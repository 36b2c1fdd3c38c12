# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import detection_router, inspection_router
from .core.config import get_settings
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_connection, ensure_indexes
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates MongoDB indexes on startup; closes the shared HTTP client and the
    MongoDB client on shutdown.
    """
    try:
        await ensure_indexes()
        logger.info("MongoDB indexes ensured")
    except Exception as e:
        # Don't fail app startup if MongoDB is temporarily unavailable
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)

    close_connection()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    application = FastAPI(
        title="Transformer Inspection Backend API",
        version="1.0.0",
        description="Inspection image detections and annotation timeline",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(detection_router, prefix="/api/v1/inspections")
    application.include_router(inspection_router, prefix="/api/v1/inspections")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
