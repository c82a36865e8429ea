"""
Global exception handler for the Baseball Stats API.
Provides centralized error handling for all API exceptions.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from src.core.logger import get_logger
from .exceptions import (
    ValidationException,
    MissingFileException,
    DataNotFoundException,
    CSVProcessingException,
    PersistenceException
)

logger = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    
    @app.exception_handler(ValidationException)
    async def handle_validation_error(request: Request, exc: ValidationException):
        logger.warning("Rejected upload on %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=400,
            content={"error": "Validation Error", "message": exc.message}
        )
    
    @app.exception_handler(MissingFileException)
    async def handle_missing_file(request: Request, exc: MissingFileException):
        logger.warning("Upload without file on %s", request.url.path)
        return JSONResponse(
            status_code=400,
            content={"error": "Missing File", "message": exc.message}
        )
    
    @app.exception_handler(DataNotFoundException)
    async def handle_not_found(request: Request, exc: DataNotFoundException):
        logger.error("Data read failed: %s", exc.message)
        return JSONResponse(
            status_code=500,
            content={"error": "Not Found", "message": exc.message}
        )
    
    @app.exception_handler(CSVProcessingException)
    async def handle_csv_error(request: Request, exc: CSVProcessingException):
        logger.error("CSV processing failed: %s", exc.message)
        return JSONResponse(
            status_code=500,
            content={"error": "CSV Processing Failed", "message": exc.message}
        )
    
    @app.exception_handler(PersistenceException)
    async def handle_persistence_error(request: Request, exc: PersistenceException):
        logger.error("Persistence failed: %s", exc.message)
        return JSONResponse(
            status_code=500,
            content={"error": "Storage Error", "message": exc.message}
        )
    
    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "message": "An unexpected error occurred"}
        )
