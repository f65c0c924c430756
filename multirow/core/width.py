import math


def items_per_row(container_width: float, item_width: float) -> int:
    """How many buttons of item_width fit side by side, never less than one."""
    if container_width <= 0 or item_width <= 0:
        return 1
    return max(1, math.floor(container_width / item_width))


def effective_width(
    container_width: float,
    visible_count: int,
    configured_width: float,
    max_rows: int,
    min_width: float,
) -> float:
    """
    Calculate the per-button width actually used.
    Buttons keep their configured width while they fit in max_rows rows.
    Once they overflow, the width shrinks so that every button fits within
    the row cap, but never below min_width. Dropping labels past that floor
    is the caller's decision.
    Args:
        container_width: Available width in pixels.
        visible_count: Number of visible buttons.
        configured_width: User-configured button width in pixels.
        max_rows: Maximum allowed rows.
        min_width: Hard floor for the shrunk width.
    Returns:
        configured_width when no shrink is needed or the input is degenerate,
        otherwise the shrunk width.
    """
    if (
        visible_count <= 0
        or container_width <= 0
        or max_rows <= 0
        or configured_width <= 0
    ):
        return configured_width
    capacity = items_per_row(container_width, configured_width) * max_rows
    if visible_count <= capacity:
        return configured_width
    needed_per_row = math.ceil(visible_count / max_rows)
    return max(min_width, math.floor(container_width / needed_per_row))
