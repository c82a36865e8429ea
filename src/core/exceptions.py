"""
Custom exceptions for the Baseball Stats API.
Provides specific error types for different failure scenarios.
"""


class BaseballStatsException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(BaseballStatsException):
    """Raised when an upload is not a CSV file."""
    pass


class MissingFileException(BaseballStatsException):
    """Raised when an upload request carries no file."""
    pass


class DataNotFoundException(BaseballStatsException):
    """Raised when data is requested before any file was uploaded."""
    pass


class CSVProcessingException(BaseballStatsException):
    """Raised when CSV file processing fails."""
    pass


class PersistenceException(BaseballStatsException):
    """Raised when the data file or timestamp cannot be written."""
    pass
