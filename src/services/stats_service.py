"""
Stats Service for business logic.
Orchestrates CSV uploads and data queries between API and repositories.
"""
from typing import BinaryIO, List, Optional
from src.models.csv_record import CsvRecord
from src.models.dto.stats_dto import UploadResponse
from src.repositories.csv_repository import CsvRepository
from src.repositories.local_csv_repository import LocalCsvRepository
from src.services.file_service import FileService
from src.services.timestamp_service import TimestampService
from src.core.exceptions import DataNotFoundException, MissingFileException, ValidationException
from src.core.logger import get_logger

logger = get_logger(__name__)


class StatsService:
    """Service for stats upload and query operations."""
    
    CSV_MEDIA_TYPES = {'text/csv', 'application/csv', 'text/x-csv'}
    CSV_EXTENSION = '.csv'
    
    def __init__(
        self,
        csv_repository: CsvRepository = None,
        timestamp_service: TimestampService = None,
        file_service: FileService = None
    ):
        self.csv_repository = csv_repository or LocalCsvRepository()
        self.timestamp_service = timestamp_service or TimestampService()
        self.file_service = file_service or FileService()
    
    def is_csv(self, filename: str, content_type: Optional[str]) -> bool:
        """Accept when either the media type or the file extension says CSV."""
        media_type = (content_type or '').split(';')[0].strip().lower()
        return media_type in self.CSV_MEDIA_TYPES or filename.lower().endswith(self.CSV_EXTENSION)
    
    def upload_stats_file(
        self,
        file: Optional[BinaryIO],
        filename: Optional[str],
        content_type: Optional[str] = None
    ) -> UploadResponse:
        """
        Store an uploaded CSV in the data slot and record the upload time.
        
        The file is written before the timestamp, so a timestamp failure
        leaves the new file in place.
        
        Args:
            file: Uploaded file stream
            filename: Original filename
            content_type: Media type declared by the client
            
        Returns:
            UploadResponse with the original filename
            
        Raises:
            MissingFileException: If no file was sent
            ValidationException: If the file is not a CSV
            PersistenceException: If the file or timestamp cannot be written
        """
        if file is None or not filename:
            raise MissingFileException("No file was uploaded.")
        
        if not self.is_csv(filename, content_type):
            raise ValidationException("Only CSV files can be uploaded.")
        
        self.csv_repository.save(file)
        timestamp = self.timestamp_service.write()
        logger.info("Accepted upload %s at %s", filename, timestamp)
        
        return UploadResponse(
            message="File uploaded successfully.",
            file=filename
        )
    
    def get_stats_data(self) -> List[CsvRecord]:
        """
        Parse the stored CSV into rows.
        
        Raises:
            DataNotFoundException: If nothing has been uploaded yet
            CSVProcessingException: If the stored file cannot be parsed
        """
        if not self.csv_repository.exists():
            raise DataNotFoundException("CSV file does not exist.")
        
        with self.csv_repository.open() as file:
            return self.file_service.parse_csv(file)
