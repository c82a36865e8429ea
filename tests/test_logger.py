"""
Unit tests for the logging helper.
"""
import logging
from src.core import config
from src.core.logger import get_logger


class TestGetLogger:
    """Test suite for get_logger."""
    
    def test_level_follows_settings(self, monkeypatch):
        """Test the logger level comes from settings.log_level."""
        monkeypatch.setattr(config.settings, "log_level", "debug")
        
        logger = get_logger("tests.logger.level")
        
        assert logger.level == logging.DEBUG
    
    def test_unknown_level_defaults_to_info(self, monkeypatch):
        monkeypatch.setattr(config.settings, "log_level", "chatty")
        assert get_logger("tests.logger.unknown").level == logging.INFO
    
    def test_handler_attached_once(self):
        """Test repeated calls do not duplicate handlers."""
        get_logger("tests.logger.once")
        assert len(get_logger("tests.logger.once").handlers) == 1
