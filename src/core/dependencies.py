"""
Dependency injection container for FastAPI.
Provides singleton-like behavior for services and repositories.
"""
from functools import lru_cache
from src.core import config
from src.repositories.csv_repository import CsvRepository
from src.repositories.timestamp_repository import TimestampRepository
from src.repositories.local_csv_repository import LocalCsvRepository
from src.repositories.local_timestamp_repository import JsonFileTimestampRepository
from src.repositories.s3_repository import S3CsvRepository
from src.repositories.s3_timestamp_repository import S3TimestampRepository
from src.services.file_service import FileService
from src.services.timestamp_service import TimestampService
from src.services.stats_service import StatsService


def _use_s3() -> bool:
    return config.settings.storage_backend.lower() == "s3"


@lru_cache()
def get_csv_repository() -> CsvRepository:
    """Get CsvRepository singleton instance for the configured backend."""
    return S3CsvRepository() if _use_s3() else LocalCsvRepository()


@lru_cache()
def get_timestamp_repository() -> TimestampRepository:
    """Get TimestampRepository singleton instance for the configured backend."""
    return S3TimestampRepository() if _use_s3() else JsonFileTimestampRepository()


@lru_cache()
def get_file_service() -> FileService:
    """Get FileService singleton instance."""
    return FileService()


@lru_cache()
def get_timestamp_service() -> TimestampService:
    """Get TimestampService singleton instance, initialized on first use."""
    service = TimestampService(timestamp_repository=get_timestamp_repository())
    service.initialize()
    return service


@lru_cache()
def get_stats_service() -> StatsService:
    """Get StatsService singleton instance with injected dependencies."""
    return StatsService(
        csv_repository=get_csv_repository(),
        timestamp_service=get_timestamp_service(),
        file_service=get_file_service()
    )


def clear_caches() -> None:
    """Drop all cached instances so the next call rebuilds from settings."""
    for factory in (
        get_csv_repository,
        get_timestamp_repository,
        get_file_service,
        get_timestamp_service,
        get_stats_service,
    ):
        factory.cache_clear()
