"""
Abstract base class for the uploaded CSV file slot.
Defines the contract for storing and reading the single data file.
"""
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import BinaryIO


class CsvRepository(ABC):
    """Abstract repository interface for the single stored CSV file."""
    
    @abstractmethod
    def save(self, file: BinaryIO) -> None:
        """Replace the stored file with the contents of file."""
        pass
    
    @abstractmethod
    def exists(self) -> bool:
        """Return True if a file has been stored."""
        pass
    
    @abstractmethod
    def open(self) -> AbstractContextManager:
        """Open the stored file for binary streaming reads."""
        pass
