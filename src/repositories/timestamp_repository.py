"""
Abstract base class for the last-update timestamp slot.
"""
from abc import ABC, abstractmethod
from typing import Optional


class TimestampRepository(ABC):
    """Abstract repository interface for the persisted update timestamp."""
    
    @abstractmethod
    def load(self) -> Optional[str]:
        """
        Return the stored timestamp, or None if nothing is stored.
        
        Raises on unreadable or corrupt backing state.
        """
        pass
    
    @abstractmethod
    def store(self, timestamp: str) -> None:
        """Overwrite the stored timestamp."""
        pass
