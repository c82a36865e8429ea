"""
Local disk repository for the uploaded CSV file.
Keeps exactly one file at a fixed path under the data directory.
"""
import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional
from src.core import config
from src.core.exceptions import CSVProcessingException, PersistenceException
from src.core.logger import get_logger
from src.repositories.csv_repository import CsvRepository

logger = get_logger(__name__)


class LocalCsvRepository(CsvRepository):
    """Repository for the CSV file slot on the local file system."""
    
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else config.settings.csv_path
        self.path.parent.mkdir(parents=True, exist_ok=True)
    
    def save(self, file: BinaryIO) -> None:
        """
        Write file to the slot, replacing any previous upload.
        
        The bytes go to a temporary file in the same directory which is then
        renamed over the slot, so readers see either the old or the new file.
        
        Raises:
            PersistenceException: If the file cannot be written
        """
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".upload-", suffix=".tmp")
            with os.fdopen(fd, "wb") as tmp:
                shutil.copyfileobj(file, tmp)
            os.replace(tmp_path, self.path)
            logger.info("Stored CSV file at %s", self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceException(f"Failed to store CSV file: {str(e)}") from e
    
    def exists(self) -> bool:
        return self.path.is_file()
    
    def open(self):
        try:
            return open(self.path, "rb")
        except OSError as e:
            raise CSVProcessingException(f"Failed to open CSV file: {str(e)}") from e
