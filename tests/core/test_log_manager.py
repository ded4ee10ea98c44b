import logging

import pytest

from scilib.core.config.settings import ScilibConfig, set_config
from scilib.core.log_manager import PACKAGE_LOGGER, LogManager, setup_logging


@pytest.fixture
def manager_factory():
    managers = []

    def make(**kwargs):
        manager = LogManager(**kwargs)
        managers.append(manager)
        return manager

    yield make
    for manager in reversed(managers):
        manager.close()


def test_console_handler_by_default(manager_factory):
    manager = manager_factory(level="INFO")
    assert manager.logger is logging.getLogger(PACKAGE_LOGGER)
    assert manager.logger.level == logging.INFO
    assert len(manager.handlers) == 1
    assert isinstance(manager.handlers[0], logging.StreamHandler)


def test_file_handler_writes_records(manager_factory, tmp_path):
    log_file = tmp_path / "logs" / "scilib.log"
    manager = manager_factory(level="DEBUG", file_path=log_file, enable_console=False)
    logging.getLogger("scilib.core.math.series").debug("scaling values")
    for handler in manager.handlers:
        handler.flush()
    assert "scaling values" in log_file.read_text()


def test_config_overrides_level(manager_factory, tmp_path):
    config = ScilibConfig(log_level="ERROR", log_file=tmp_path / "x.log")
    manager = manager_factory(config=config, enable_console=False)
    assert manager.level == logging.ERROR
    assert manager.file_path == tmp_path / "x.log"


def test_set_level(manager_factory):
    manager = manager_factory(level="WARNING")
    manager.set_level("DEBUG")
    assert manager.logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in manager.handlers)


def test_invalid_format_type():
    with pytest.raises(ValueError, match="format_type"):
        LogManager(format_type="xml")


def test_close_removes_handlers():
    with LogManager(level="INFO") as manager:
        handler = manager.handlers[0]
        assert handler in logging.getLogger(PACKAGE_LOGGER).handlers
    assert handler not in logging.getLogger(PACKAGE_LOGGER).handlers
    assert manager.handlers == []


def test_setup_logging_uses_global_config(tmp_path):
    set_config(ScilibConfig(log_level="INFO"))
    manager = setup_logging(enable_console=False)
    try:
        assert manager.level == logging.INFO
        assert manager.handlers == []
    finally:
        manager.close()


def test_repeated_setup_shares_console_handler(manager_factory):
    first = manager_factory(level="INFO")
    second = manager_factory(level="INFO")
    logger = logging.getLogger(PACKAGE_LOGGER)
    consoles = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(consoles) == 1
    assert first.handlers == consoles
    assert second.handlers == []


def test_close_restores_previous_level():
    logger = logging.getLogger(PACKAGE_LOGGER)
    before = logger.level
    manager = LogManager(level="DEBUG", enable_console=False)
    assert logger.level == logging.DEBUG
    manager.close()
    assert logger.level == before
