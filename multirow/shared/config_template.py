default_config = {
    "_section_hint": (
        "Configuration for the multi-row taskbar, which wraps window "
        "buttons across several rows when they do not fit in one."
    ),
    "taskbar": {
        "_section_hint": "Window list behaviour and button layout.",
        "layout": {
            "_section_hint": "How buttons are packed into rows.",
            "max_rows": 2,
            "max_rows_hint": (
                "Maximum number of rows (1-4). Past this limit buttons "
                "shrink instead of wrapping."
            ),
            "adaptive_rows": True,
            "adaptive_rows_hint": (
                "Use only as many rows as the open windows need. When off, "
                "the taskbar always shows max_rows rows."
            ),
            "button_width": 150,
            "button_width_hint": "Nominal width of a window button in pixels.",
            "min_button_width": 50,
            "min_button_width_hint": (
                "Buttons never shrink below this width. At this width labels "
                "are dropped and only icons are shown."
            ),
            "icon_size_override": 0,
            "icon_size_override_hint": (
                "Fixed icon size in pixels. **0** scales the icon with the "
                "row height."
            ),
            "label_font_size": 0,
            "label_font_size_hint": (
                "Fixed label font size in points. **0** uses the theme font "
                "on one row and a size derived from the row height otherwise."
            ),
            "row_spacing": 0,
            "row_spacing_hint": "Vertical spacing reserved around each row.",
        },
        "group_windows": True,
        "group_windows_hint": (
            "Keep windows of the same application next to each other."
        ),
        "show_all_workspaces": False,
        "show_all_workspaces_hint": "List windows from every workspace.",
    },
}

LAYOUT_SCHEMA = {
    "max_rows": {"type": "spinbutton", "default": 2, "min": 1, "max": 4, "step": 1},
    "adaptive_rows": {"type": "switch", "default": True},
    "button_width": {
        "type": "spinbutton",
        "default": 150,
        "min": 50,
        "max": 400,
        "step": 10,
    },
    "min_button_width": {
        "type": "spinbutton",
        "default": 50,
        "min": 20,
        "max": 400,
        "step": 10,
    },
    "icon_size_override": {
        "type": "spinbutton",
        "default": 0,
        "min": 0,
        "max": 64,
        "step": 2,
    },
    "label_font_size": {
        "type": "spinbutton",
        "default": 0,
        "min": 0,
        "max": 24,
        "step": 1,
    },
    "row_spacing": {
        "type": "spinbutton",
        "default": 0,
        "min": 0,
        "max": 16,
        "step": 1,
    },
}
