import pytest
import structlog
from multirow.shared.config_handler import ConfigHandler
from multirow.taskbar.config import TaskbarConfig
from multirow.taskbar.taskbar import TaskbarLayout


@pytest.fixture
def logger():
    return structlog.get_logger("multirow-tests")


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "multirow" / "config.toml"


@pytest.fixture
def config_handler(logger, config_file):
    return ConfigHandler(logger, config_file)


@pytest.fixture
def taskbar(config_handler, logger):
    return TaskbarLayout(TaskbarConfig(config_handler), logger)


def make_view(view_id, app_id=None, workspace=None):
    return {"id": view_id, "app-id": app_id, "workspace": workspace}
