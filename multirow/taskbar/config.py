from multirow.core.plan import LayoutConfig


class TaskbarConfig:
    """Handles taskbar settings registration and central retrieval."""

    def __init__(self, config_handler):
        """Initializes the config view over a ConfigHandler.

        Args:
            config_handler: The shared ConfigHandler instance.
        """
        self.config_handler = config_handler
        self.h = self.config_handler.get_setting_add_hint
        self.layout = LayoutConfig()

    def register_settings(self):
        """Reads the behaviour toggles and the validated layout section.

        Hints for these keys live in config_template.
        """
        self.group_windows = self.h(["taskbar", "group_windows"], True)
        self.show_all_workspaces = self.h(["taskbar", "show_all_workspaces"], False)
        self.layout: LayoutConfig = self.config_handler.get_layout_config()
