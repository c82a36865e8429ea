"""
Stats API routes.
Handles HTTP endpoints for CSV uploads, parsed data and the update time.
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile
from src.services.stats_service import StatsService
from src.services.timestamp_service import TimestampService
from src.core.dependencies import get_stats_service, get_timestamp_service
from src.models.dto.stats_dto import DataResponse, LastUpdateResponse, UploadResponse

router = APIRouter(prefix="/api", tags=["Stats"])


@router.get("/data", response_model=DataResponse)
def get_data(stats_service: StatsService = Depends(get_stats_service)):
    """
    Return the stored CSV as one object per row, keyed by header column.
    """
    return DataResponse(data=stats_service.get_stats_data())


@router.post("/upload", response_model=UploadResponse)
def upload_csv(
    file: Optional[UploadFile] = File(None, description="CSV file with stats data"),
    stats_service: StatsService = Depends(get_stats_service)
):
    """
    Upload a CSV file, replacing the previously stored one.
    
    Accepted when the media type is CSV or the filename ends in .csv.
    """
    if file is None:
        return stats_service.upload_stats_file(None, None)
    return stats_service.upload_stats_file(file.file, file.filename, file.content_type)


@router.get("/lastUpdate", response_model=LastUpdateResponse)
def get_last_update(timestamp_service: TimestampService = Depends(get_timestamp_service)):
    """Return the time of the last successful upload."""
    return LastUpdateResponse(timestamp=timestamp_service.read())
