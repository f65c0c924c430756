import os
import copy
import math
import time
import toml
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler
from multirow.core.plan import LayoutConfig
from multirow.shared import config_template
from multirow.shared.path_handler import PathHandler

LAYOUT_PATH = ["taskbar", "layout"]


class ConfigReloadHandler(FileSystemEventHandler):
    """
    Calls back whenever the watched file is written, created or renamed
    into place. Editors that save through a temporary file only produce
    created/moved events for the real path. Repeated events for the same
    save are filtered by the callback's mtime check.
    """

    def __init__(self, callback, watched_path):
        super().__init__()
        self.callback = callback
        self._watched = Path(watched_path).resolve()

    def _matches(self, path) -> bool:
        if not path:
            return False
        try:
            return Path(os.fsdecode(path)).resolve() == self._watched
        except OSError:
            return False

    def on_modified(self, event):
        if self._matches(event.src_path):
            self.callback()

    def on_created(self, event):
        if self._matches(event.src_path):
            self.callback()

    def on_moved(self, event):
        if self._matches(event.dest_path):
            self.callback()


class ConfigHandler:
    """
    Manages the taskbar configuration file (config.toml).
    Handles file I/O, merging with defaults, validation of the layout
    section into a LayoutConfig, and reloading when the file changes
    on disk (via watchdog).
    """

    def __init__(self, logger, config_file: Optional[Union[str, Path]] = None):
        """
        Args:
            logger: structlog logger shared with the taskbar.
            config_file: Explicit path to config.toml. Defaults to the XDG
                config directory.
        """
        self.logger = logger
        self.path_handler = PathHandler(logger)
        self.default_config = copy.deepcopy(config_template.default_config)
        if config_file is None:
            config_file = self.path_handler.get_config_file()
        self.config_file = Path(config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self._cached_config: Optional[Dict[str, Any]] = None
        self._last_mod_time: float = 0.0
        self._load_successful: bool = False
        self._reload_callbacks: List[Callable[[], None]] = []
        self.observer: Optional[Any] = None
        self.config_data = self.load_config()

    def _strip_hints(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively removes keys ending with '_hint' before writing TOML."""
        stripped_data = {}
        for key, value in data.items():
            if key.endswith("_hint"):
                continue
            if isinstance(value, dict):
                stripped_data[key] = self._strip_hints(value)
            else:
                stripped_data[key] = value
        return stripped_data

    @property
    def default_config_stripped(self) -> Dict[str, Any]:
        return self._strip_hints(self.default_config)

    def _recursive_merge(
        self,
        user_config: Dict[str, Any],
        default_config: Dict[str, Any],
    ) -> bool:
        """
        Recursively merges missing keys from `default_config` into `user_config`.
        Returns:
            True if any key was added.
        """
        write_back_needed = False
        for key, default_value in default_config.items():
            if key not in user_config:
                user_config[key] = copy.deepcopy(default_value)
                write_back_needed = True
            elif isinstance(default_value, dict) and isinstance(
                user_config.get(key), dict
            ):
                if self._recursive_merge(user_config[key], default_value):
                    write_back_needed = True
        return write_back_needed

    def save_config(self) -> None:
        """Writes the current state of self.config_data to the TOML file."""
        if not self._load_successful:
            self.logger.warning(
                "Skipping configuration save: config.toml failed to load. Please fix it manually."
            )
            return
        try:
            with open(self.config_file, "w") as f:
                toml.dump(self.config_data, f)
            self._last_mod_time = os.path.getmtime(self.config_file)
            self.logger.info("Configuration saved successfully.")
        except OSError as e:
            self.logger.error(f"Failed to save configuration to file: {e}")

    def reload_config(self) -> None:
        """Loads the configuration from the file and notifies subscribers."""
        self.config_data = self.load_config(force_reload=True)
        self.logger.info("Configuration reloaded from file.")
        for callback in list(self._reload_callbacks):
            try:
                callback()
            except Exception:
                self.logger.exception("Config reload callback failed.")

    def load_config(self, force_reload: bool = False) -> Dict[str, Any]:
        """
        Loads the configuration from file, or uses defaults if missing/corrupt.
        Args:
            force_reload: If True, bypasses the internal cache.
        Returns:
            The loaded and merged configuration dictionary.
        """
        if self._cached_config and not force_reload:
            return self._cached_config
        config_from_file: Dict[str, Any] = {}
        file_must_be_created = not self.config_file.exists()
        load_succeeded = False
        if file_must_be_created:
            self.logger.info("Config file is missing. Will apply defaults and create.")
            load_succeeded = True
        else:
            max_retries = 3
            retry_delay_seconds = 0.1
            for attempt in range(max_retries):
                try:
                    with open(self.config_file, "r") as f:
                        config_from_file = toml.load(f)
                    self.logger.debug("Existing config.toml loaded successfully.")
                    load_succeeded = True
                    self._last_mod_time = os.path.getmtime(self.config_file)
                    break
                except (OSError, toml.TomlDecodeError) as e:
                    self.logger.error(
                        f"Error loading config file on attempt {attempt + 1}: {e}. Retrying..."
                    )
                    time.sleep(retry_delay_seconds)
            else:
                self.logger.error(
                    "Failed to load config file after all retries. Using default configuration and skipping file save to preserve user data."
                )
                config_from_file = {}
        self._load_successful = load_succeeded
        self._recursive_merge(config_from_file, self.default_config_stripped)
        if file_must_be_created:
            self.logger.info(
                "Saving default configuration to file because it was missing."
            )
            self.config_data = config_from_file
            self.save_config()
        self._cached_config = config_from_file
        return config_from_file

    def get_root_setting(self, key_path: List[str], default_value: Any = None) -> Any:
        """
        Traverses self.config_data to retrieve a value.
        Args:
            key_path: Path of keys, e.g. ['taskbar', 'layout', 'max_rows'].
            default_value: Value to return if the path is not found.
        """
        current_data = self.config_data
        for i, key in enumerate(key_path):
            if isinstance(current_data, dict) and key in current_data:
                current_data = current_data[key]
            else:
                self.logger.debug(
                    f"Missing configuration key at path: {' -> '.join(key_path[: i + 1])}. Using default value: {default_value}"
                )
                return default_value
        return current_data

    def set_root_setting(self, key_path: List[str], new_value: Any) -> bool:
        """Sets a configuration value, creating sections as needed, and saves."""
        if not key_path:
            self.logger.error("Configuration key path cannot be empty.")
            return False
        if not self._load_successful:
            self.logger.warning(
                f"Update to key {' -> '.join(key_path)} skipped: Config file failed to load. Please fix config.toml manually."
            )
            return False
        current_data = self.config_data
        for key in key_path[:-1]:
            if not isinstance(current_data.get(key), dict):
                current_data[key] = {}
            current_data = current_data[key]
        current_data[key_path[-1]] = new_value
        self.logger.info(
            f"Set and saved config key {' -> '.join(key_path)} to {new_value}."
        )
        self.save_config()
        return True

    def update_config(self, key_path: List[str], new_value: Any) -> bool:
        """Updates an *existing* setting without creating new sections."""
        if not key_path:
            self.logger.error("Configuration key path cannot be empty.")
            return False
        parent = self.get_root_setting(key_path[:-1])
        if not isinstance(parent, dict):
            self.logger.error(
                f"Cannot update config: missing or invalid section. Path: {' -> '.join(key_path)}"
            )
            return False
        return self.set_root_setting(key_path, new_value)

    def _inject_to_dict(
        self, target_dict: Dict[str, Any], key_path: List[str], new_value: Any
    ) -> None:
        current_data = target_dict
        for key in key_path[:-1]:
            if not isinstance(current_data.get(key), dict):
                current_data[key] = {}
            current_data = current_data[key]
        current_data[key_path[-1]] = new_value

    def get_setting_add_hint(
        self, key_path: List[str], default_value: Any, hint: Optional[str] = None
    ) -> Any:
        """
        Returns a setting, registering its default and hint in
        self.default_config. A missing setting is written to the file.
        Without a hint, the one already in config_template is kept.
        """
        self._inject_to_dict(self.default_config, key_path, default_value)
        if hint is not None:
            hint_path = key_path[:-1] + [f"{key_path[-1]}_hint"]
            self._inject_to_dict(self.default_config, hint_path, hint)
        missing = object()
        value = self.get_root_setting(key_path, missing)
        if value is missing:
            self.set_root_setting(key_path, default_value)
            return default_value
        return value

    def _validated(self, section: Dict[str, Any], key: str) -> Any:
        """
        Reads one layout key and coerces it into its schema range.
        Wrong types fall back to the default, numbers are clamped.
        """
        schema = config_template.LAYOUT_SCHEMA[key]
        default = schema["default"]
        value = section.get(key, default)
        if schema["type"] == "switch":
            if not isinstance(value, bool):
                self.logger.warning(
                    f"Invalid value {value!r} for {key}, expected a boolean. Using {default}."
                )
                return default
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            self.logger.warning(
                f"Invalid value {value!r} for {key}, expected a number. Using {default}."
            )
            return default
        if math.isnan(value):
            self.logger.warning(f"Invalid value nan for {key}. Using {default}.")
            return default
        if math.isinf(value):
            clamped = schema["max"] if value > 0 else schema["min"]
        else:
            clamped = max(schema["min"], min(schema["max"], int(value)))
        if clamped != value:
            self.logger.warning(
                f"Value {value} for {key} is outside [{schema['min']}, {schema['max']}]. Using {clamped}."
            )
        return clamped

    def get_layout_config(self) -> LayoutConfig:
        """
        Builds a validated LayoutConfig from the [taskbar.layout] section.
        This is the only place layout settings are checked; the layout core
        trusts what it receives.
        """
        section = self.get_root_setting(LAYOUT_PATH, {})
        if not isinstance(section, dict):
            self.logger.warning(
                f"[{'.'.join(LAYOUT_PATH)}] is not a table. Using defaults."
            )
            section = {}
        button_width = self._validated(section, "button_width")
        min_button_width = self._validated(section, "min_button_width")
        if min_button_width > button_width:
            self.logger.warning(
                f"min_button_width {min_button_width} exceeds button_width {button_width}. Using {button_width}."
            )
            min_button_width = button_width
        return LayoutConfig(
            max_rows=self._validated(section, "max_rows"),
            configured_item_width=button_width,
            min_item_width=min_button_width,
            icon_override=self._validated(section, "icon_size_override"),
            font_override=self._validated(section, "label_font_size"),
            vertical_margin=self._validated(section, "row_spacing"),
            adaptive=self._validated(section, "adaptive_rows"),
        )

    def connect_reload(self, callback: Callable[[], None]) -> None:
        """Registers a callback invoked after every reload from disk."""
        self._reload_callbacks.append(callback)

    def _on_config_file_changed(self) -> None:
        try:
            current_mod_time = os.path.getmtime(self.config_file)
        except FileNotFoundError:
            self.logger.warning("Config file not found during change check.")
            return
        if current_mod_time != self._last_mod_time:
            self.logger.info("Configuration file modified. Reloading...")
            self.reload_config()
        else:
            self.logger.debug(
                "Change event received but the file is unchanged since the last load."
            )

    def start_watcher(self) -> None:
        """Starts a watchdog observer on the config directory."""
        if self.observer:
            return
        handler = ConfigReloadHandler(self._on_config_file_changed, self.config_file)
        self.observer = Observer()
        self.observer.schedule(handler, str(self.config_file.parent), recursive=False)
        self.observer.start()
        self.logger.debug(f"Watching {self.config_file} for changes.")

    def stop_watcher(self) -> None:
        if not self.observer:
            return
        self.observer.stop()
        self.observer.join(timeout=1.0)
        self.observer = None
