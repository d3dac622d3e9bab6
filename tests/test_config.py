"""
Unit tests for configuration module.
Tests environment variable loading, validation, and configuration values.
"""

import pytest
import os
from unittest.mock import patch

from undocalc import config


class TestConfig:
    """Test configuration module."""

    def test_initial_value(self):
        """Accumulators start from zero."""
        assert config.INITIAL_VALUE == 0.0
        assert isinstance(config.INITIAL_VALUE, float)

    @patch.dict(os.environ, {"UNDOCALC_MAX_HISTORY": ""}, clear=False)
    def test_max_history_empty_is_unbounded(self):
        assert config.get_max_history() is None

    def test_max_history_unset_is_unbounded(self, clean_env):
        assert config.get_max_history() is None

    @patch.dict(os.environ, {"UNDOCALC_MAX_HISTORY": " 25 "}, clear=False)
    def test_max_history_from_env(self):
        assert config.get_max_history() == 25

    @patch.dict(os.environ, {"UNDOCALC_MAX_HISTORY": "lots"}, clear=False)
    def test_max_history_not_a_number(self):
        with pytest.raises(ValueError, match="UNDOCALC_MAX_HISTORY"):
            config.get_max_history()

    @patch.dict(os.environ, {"UNDOCALC_MAX_HISTORY": "0"}, clear=False)
    def test_max_history_not_positive(self):
        with pytest.raises(ValueError, match="positive"):
            config.get_max_history()

    def test_logging_configuration(self):
        """Test logging configuration."""
        # Log level should be set
        assert hasattr(config, 'LOG_LEVEL')
        assert isinstance(config.LOG_LEVEL, str)
        assert config.LOG_LEVEL in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

        # Log format should be set
        assert hasattr(config, 'LOG_FORMAT')
        assert isinstance(config.LOG_FORMAT, str)
        assert "%(name)s" in config.LOG_FORMAT

    def test_log_level_override(self, clean_env, monkeypatch):
        """UNDOCALC_LOG_LEVEL applies when LOG_LEVEL is unset."""
        import importlib
        monkeypatch.setenv("UNDOCALC_LOG_LEVEL", "debug")
        importlib.reload(config)
        try:
            assert config.LOG_LEVEL == "DEBUG"
        finally:
            monkeypatch.delenv("UNDOCALC_LOG_LEVEL")
            importlib.reload(config)
