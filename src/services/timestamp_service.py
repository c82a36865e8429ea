"""
Timestamp Service for the time of the last successful upload.
"""
from datetime import datetime, timezone
from typing import Callable, Optional
from src.core.exceptions import PersistenceException
from src.core.logger import get_logger
from src.repositories.timestamp_repository import TimestampRepository
from src.repositories.local_timestamp_repository import JsonFileTimestampRepository

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format as ISO-8601 UTC with milliseconds and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class TimestampService:
    """Reads and writes the persisted last-update timestamp."""
    
    def __init__(
        self,
        timestamp_repository: TimestampRepository = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.timestamp_repository = timestamp_repository or JsonFileTimestampRepository()
        self.clock = clock or _utc_now
    
    def now(self) -> str:
        return format_timestamp(self.clock())
    
    def initialize(self) -> None:
        """
        Create the timestamp with the current time if none is stored yet.
        
        Existing state is left alone even if it is unreadable, and an
        unwritable medium is only logged; read() covers both cases.
        """
        try:
            if self.timestamp_repository.load() is not None:
                return
        except Exception as e:
            logger.warning("Existing update timestamp is unreadable: %s", e)
            return
        
        timestamp = self.now()
        try:
            self.timestamp_repository.store(timestamp)
        except PersistenceException as e:
            logger.warning("Could not create update timestamp: %s", e.message)
            return
        logger.info("Initialized update timestamp to %s", timestamp)
    
    def read(self) -> str:
        """
        Return the last update timestamp.
        
        Never raises: missing or corrupt state is logged and the current
        time is returned instead.
        """
        try:
            timestamp = self.timestamp_repository.load()
        except Exception as e:
            logger.warning("Failed to read update timestamp, using current time: %s", e)
            return self.now()
        
        if timestamp is None:
            logger.warning("No update timestamp stored, using current time")
            return self.now()
        return timestamp
    
    def write(self, timestamp: Optional[str] = None) -> str:
        """
        Persist timestamp, defaulting to the current time.
        
        Returns:
            The timestamp that was written
            
        Raises:
            PersistenceException: If the backing store is unwritable
        """
        timestamp = timestamp or self.now()
        self.timestamp_repository.store(timestamp)
        return timestamp
