import logging
import pytest
import structlog
from multirow.core import log_setup
from multirow.taskbar.create_taskbar import create_taskbar


@pytest.fixture
def restore_logging():
    root = logging.getLogger(log_setup.LOGGER_NAME)
    handlers = root.handlers[:]
    level = root.level
    propagate = root.propagate
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    root.propagate = propagate
    structlog.reset_defaults()


def test_create_taskbar_wires_logging_config_and_watcher(tmp_path, restore_logging):
    config_file = tmp_path / "config" / "config.toml"
    log_file = tmp_path / "state" / "multirow.log"
    taskbar = create_taskbar(str(config_file), log_file=str(log_file))
    try:
        assert config_file.exists()
        assert taskbar.config.config_handler.observer is not None
        assert taskbar.set_geometry(60, 938).rows == 1
    finally:
        taskbar.config.config_handler.stop_watcher()
    for handler in logging.getLogger(log_setup.LOGGER_NAME).handlers:
        handler.flush()
    assert "Taskbar layout ready." in log_file.read_text()


def test_create_taskbar_without_watcher(tmp_path, restore_logging):
    taskbar = create_taskbar(
        str(tmp_path / "config.toml"),
        vertical=True,
        watch=False,
        log_file=str(tmp_path / "multirow.log"),
    )
    assert taskbar.vertical is True
    assert taskbar.config.config_handler.observer is None
