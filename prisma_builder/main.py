from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from prisma_builder.core import exceptions
from prisma_builder.core.config import settings
from prisma_builder.core.logger import setup_logging
from prisma_builder.core.response.handlers import (
    app_exception_handler,
    global_exception_handler,
)

# Import routers from apps
from prisma_builder.apps.schema_builder import model_router, render_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s %s started", settings.PROJECT_NAME, settings.PROJECT_VERSION)
    yield
    logger.info("Shutting down, in-memory sessions are discarded")


setup_logging()

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_INFO,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Adjust in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add exception handlers
app.add_exception_handler(exceptions.AppException, app_exception_handler)  # type: ignore
app.add_exception_handler(Exception, global_exception_handler)


# Health check endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with health check."""
    return {
        "message": "🚀 Server is running!",
        "status": "healthy",
        "version": settings.PROJECT_VERSION,
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "message": "Service is running normally"}


# Include app routers
app.include_router(render_router, prefix=settings.API_PREFIX)
app.include_router(model_router, prefix=settings.API_PREFIX)


def run(host: str = settings.HOST, port: int = settings.PORT, reload: bool = False) -> None:
    uvicorn.run(
        "prisma_builder.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run(reload=True)
