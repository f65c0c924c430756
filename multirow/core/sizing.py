import math

MIN_ICON_SIZE = 12
MIN_FIXED_ICON_SIZE = 16
MIN_FONT_SIZE = 6
MAX_FONT_SIZE = 10
SPACIOUS_ICON_RATIO = 0.25
COMPACT_ICON_RATIO = 0.4
FONT_DIVISOR = 3.5


def row_height(panel_height: float, rows: int, vertical_margin: float = 0) -> int:
    """
    Calculate the height of a single row.
    The margin is per-row chrome reserved by the hosting container, so it is
    removed once for every row before the panel height is divided.
    Args:
        panel_height: Total panel height in pixels.
        rows: Number of rows.
        vertical_margin: Pixels consumed outside the content box of each row.
    Returns:
        Row height in pixels, floored and never negative.
    """
    rows = max(1, rows)
    return max(0, math.floor((panel_height - vertical_margin * rows) / rows))


def button_height(panel_height: float, rows: int, vertical_margin: float = 0) -> int:
    # buttons fill their row
    return row_height(panel_height, rows, vertical_margin)


def font_size(
    panel_height: float, rows: int, vertical_margin: float = 0, override: int = 0
) -> int:
    """
    Label font size in points for the given row layout.
    A positive override is returned untouched. A single row returns 0, which
    tells the caller to keep the theme font.
    """
    if override > 0:
        return override
    if rows <= 1:
        return 0
    size = math.floor(row_height(panel_height, rows, vertical_margin) / FONT_DIVISOR)
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))


def icon_size(
    panel_height: float, rows: int, override: int, vertical_margin: float = 0
) -> int:
    """
    Icon size in pixels for the given row layout.
    Args:
        panel_height: Total panel height in pixels.
        rows: Computed number of rows.
        override: User override, 0 means auto-scale. Positive values are
            returned as-is, without clamping.
        vertical_margin: Per-row margin, see row_height.
    Returns:
        The override, or the row height scaled by the mode ratio and floored
        at MIN_ICON_SIZE.
    """
    if override > 0:
        return override
    ratio = SPACIOUS_ICON_RATIO if rows <= 1 else COMPACT_ICON_RATIO
    height = row_height(panel_height, rows, vertical_margin)
    return max(MIN_ICON_SIZE, math.floor(height * ratio))


def fixed_icon_size(
    panel_height: float, rows: int, override: int, vertical_margin: float = 0
) -> int:
    """Icon size used when adaptive rows are disabled: row height minus padding."""
    if override > 0:
        return override
    height = row_height(panel_height, rows, vertical_margin)
    return max(MIN_FIXED_ICON_SIZE, height - 8)
