from typing import NamedTuple


class Rect(NamedTuple):
    """Bounding box of a placed taskbar button, in container coordinates."""

    x: float
    y: float
    width: float
    height: float


class PanelGeometry(NamedTuple):
    """Size of the panel region the buttons are packed into.

    height is the full panel height that rows share, width is the space
    available to the button container along the panel.
    """

    height: float
    width: float
