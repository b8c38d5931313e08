"""
Тесты для настройки логирования
"""

import logging

import pytest

from src.core.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from src.core.logging_config import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    configure_logging(DEFAULT_LOG_LEVEL)
    root.setLevel(level)


class TestConfigureLogging:
    """configure_logging / get_logger"""

    def test_level_is_upper_cased(self):
        assert configure_logging("debug") == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        assert configure_logging() == "ERROR"
        assert logging.getLogger().level == logging.ERROR

    def test_numeric_level(self):
        assert configure_logging(logging.INFO) == logging.INFO

    def test_get_logger_is_module_scoped(self):
        logger = get_logger("src.core.buffers.owned_matrix")
        assert logger.name == "src.core.buffers.owned_matrix"
        assert logger is logging.getLogger("src.core.buffers.owned_matrix")

    def test_rejected_level_is_not_remembered(self):
        """Неприменённый уровень не кэшируется и снова отклоняется"""
        configure_logging("INFO")
        for _ in range(2):
            with pytest.raises(ValueError, match="Unknown level"):
                configure_logging("loud")
        assert logging.getLogger().level == logging.INFO
        assert configure_logging("INFO") == "INFO"
