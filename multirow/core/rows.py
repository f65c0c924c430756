import math

SPACIOUS = "spacious"
COMPACT = "compact"


def row_count(
    container_width: float, item_count: int, item_width: float, max_rows: int
) -> int:
    """
    Calculate how many rows are needed to show item_count buttons.
    Args:
        container_width: Available width in pixels.
        item_count: Number of visible buttons.
        item_width: Configured width per button in pixels.
        max_rows: Maximum allowed rows.
    Returns:
        Number of rows, between 1 and max_rows. Degenerate input yields 1.
    """
    if item_count <= 0 or container_width <= 0 or item_width <= 0 or max_rows <= 0:
        return 1
    items_per_row = max(1, math.floor(container_width / item_width))
    needed = math.ceil(item_count / items_per_row)
    return max(1, min(needed, max_rows))


def layout_mode(rows: int) -> str:
    """Returns 'spacious' for a single row and 'compact' for anything more."""
    return SPACIOUS if rows <= 1 else COMPACT
