import logging
from typing import Any, Callable, Optional
from multirow.core.log_setup import setup_logging
from multirow.shared.config_handler import ConfigHandler
from multirow.taskbar.config import TaskbarConfig
from multirow.taskbar.taskbar import TaskbarLayout


def create_taskbar(
    config_file: Optional[str] = None,
    vertical: bool = False,
    schedule: Optional[Callable[[Callable], Any]] = None,
    watch: bool = True,
    log_level: int = logging.INFO,
    log_file: Optional[str] = None,
) -> TaskbarLayout:
    """
    Sets up logging and configuration and returns a ready TaskbarLayout.
    This is the entry point a host shell calls once at startup.
    Args:
        config_file: Path to config.toml, defaults to the XDG location.
        vertical: Whether the panel is vertical.
        schedule: Runs a callable on the UI thread, e.g. GLib.idle_add.
            Config reloads are routed through it.
        watch: Reload the layout when config.toml changes on disk.
        log_level: Level for both the console and the log file.
        log_file: Log file path, defaults to the XDG state directory.
    """
    logger = setup_logging(log_level, log_file)
    config_handler = ConfigHandler(logger, config_file)
    taskbar = TaskbarLayout(
        TaskbarConfig(config_handler), logger, vertical=vertical, schedule=schedule
    )
    if watch:
        config_handler.start_watcher()
    logger.info("Taskbar layout ready.")
    return taskbar
