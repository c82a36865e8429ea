"""
Data Transfer Objects for the Baseball Stats API.
Defines response schemas for API endpoints.
"""
from typing import Dict, List
from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Response schema for a successful CSV upload."""
    message: str = Field(..., description="Status message")
    file: str = Field(..., description="Original filename of the uploaded file")


class DataResponse(BaseModel):
    """Response schema for the stored CSV rendered as rows."""
    data: List[Dict[str, str]] = Field(..., description="One object per CSV row, keyed by header")


class LastUpdateResponse(BaseModel):
    """Response schema for the last successful upload time."""
    timestamp: str = Field(..., description="ISO-8601 time of the last upload")


class HealthResponse(BaseModel):
    """Response schema for the health check."""
    status: str
    service: str
    version: str
