"""
Logging setup shared by the API, services and client store.
"""
import logging
from src.core import config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str = "baseball_stats") -> logging.Logger:
    """
    Return a logger with a console handler attached once.
    
    The level comes from settings.log_level (LOG_LEVEL, default INFO).
    Calling it repeatedly for the same name never duplicates handlers.
    """
    logger = logging.getLogger(name)
    
    if logger.handlers:
        return logger
    
    level = getattr(logging, config.settings.log_level.upper(), logging.INFO)
    logger.setLevel(level)
    
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    
    return logger
