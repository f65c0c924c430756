from typing import Sequence, Tuple

RectLike = Tuple[float, float, float, float]


def nearest_index(
    rects: Sequence[RectLike], cursor_x: float, cursor_y: float, is_vertical: bool
) -> int:
    """
    Find the button whose center is closest to the cursor during a drag.
    Distance is always measured in both axes. On a multi-row taskbar a
    cursor over row 2 must resolve to a row 2 button even when a row 1
    button has the same horizontal center. is_vertical only mirrors the
    caller's panel orientation and does not change the metric.
    Args:
        rects: (x, y, width, height) of every placed button, in order.
            Rect instances work as they are.
        cursor_x: Cursor x in the same coordinate space as rects.
        cursor_y: Cursor y in the same coordinate space as rects.
        is_vertical: Whether the panel is vertical.
    Returns:
        Index of the nearest button, the first one on ties, or -1 when
        there are no buttons.
    """
    best_index = -1
    best_distance = 0.0
    for index, (x, y, width, height) in enumerate(rects):
        dx = cursor_x - (x + width / 2)
        dy = cursor_y - (y + height / 2)
        # squared distance, only the ordering matters
        distance = dx * dx + dy * dy
        if best_index == -1 or distance < best_distance:
            best_index = index
            best_distance = distance
    return best_index
