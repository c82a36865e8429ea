"""
JSON file repository for the last-update timestamp.
Stores {"timestamp": "<ISO-8601>"} at a fixed path.
"""
import json
from pathlib import Path
from typing import Optional
from src.core import config
from src.core.exceptions import PersistenceException
from src.repositories.timestamp_repository import TimestampRepository


class JsonFileTimestampRepository(TimestampRepository):
    """Repository for the update timestamp kept in a small JSON file."""
    
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else config.settings.last_update_path
        self.path.parent.mkdir(parents=True, exist_ok=True)
    
    def load(self) -> Optional[str]:
        """
        Read the timestamp from disk.
        
        Returns:
            Timestamp string, or None if the file does not exist
            
        Raises:
            OSError, ValueError: If the file is unreadable or malformed
        """
        if not self.path.exists():
            return None
        
        with open(self.path, "r", encoding="utf-8") as f:
            document = json.load(f)
        
        timestamp = document.get("timestamp") if isinstance(document, dict) else None
        if not isinstance(timestamp, str):
            raise ValueError(f"No timestamp in {self.path}")
        return timestamp
    
    def store(self, timestamp: str) -> None:
        """
        Overwrite the timestamp file.
        
        Raises:
            PersistenceException: If the file cannot be written
        """
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"timestamp": timestamp}, f)
        except OSError as e:
            raise PersistenceException(f"Failed to write update timestamp: {str(e)}") from e
