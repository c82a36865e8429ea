"""
Main FastAPI application entry point.
Configures and initializes the Baseball Stats API.
"""
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from mangum import Mangum
from src.core.config import settings
from src.core.dependencies import get_csv_repository, get_timestamp_service
from src.core.exception_handler import register_exception_handlers
from src.core.logger import get_logger
from src.api.routes import health_routes, stats_routes

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates the data directory and the initial update timestamp
    get_csv_repository()
    get_timestamp_service()
    logger.info("%s %s started (%s)", settings.api_title, settings.api_version, settings.environment)
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Upload baseball stats as CSV and read them back as JSON",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)

# Register routes
app.include_router(health_routes.router)
app.include_router(stats_routes.router)

# Static viewer, mounted last so /api routes take precedence
if os.path.isdir(settings.public_dir):
    app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")


# Middleware to log request paths
@app.middleware("http")
async def log_request(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    return response

# Lambda handler for AWS
handler = Mangum(app, lifespan="off")


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3000)
