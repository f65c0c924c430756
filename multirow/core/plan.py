from dataclasses import dataclass

from multirow.core.geometry import PanelGeometry
from multirow.core.rows import layout_mode, row_count
from multirow.core.sizing import fixed_icon_size, font_size, icon_size, row_height
from multirow.core.width import effective_width


@dataclass(frozen=True)
class LayoutConfig:
    """
    User-controlled layout settings for one planning pass.
    Values are expected to be validated already, see
    ConfigHandler.get_layout_config.
    Attributes:
        max_rows: Row cap before buttons start shrinking.
        configured_item_width: Nominal button width in pixels.
        min_item_width: Floor for the shrunk button width.
        icon_override: Fixed icon size, 0 for automatic.
        font_override: Fixed label font size, 0 for automatic.
        vertical_margin: Per-row spacing reserved by the container.
        adaptive: Compute rows from the button count. When False the
            taskbar always uses max_rows.
    """

    max_rows: int = 2
    configured_item_width: int = 150
    min_item_width: int = 50
    icon_override: int = 0
    font_override: int = 0
    vertical_margin: int = 0
    adaptive: bool = True


@dataclass(frozen=True)
class LayoutPlan:
    rows: int
    mode: str
    row_height: int
    icon_size: int
    font_size: int
    effective_item_width: float
    icon_only_mode: bool


def is_icon_only(width: float, config: LayoutConfig) -> bool:
    """Labels are dropped once a shrunk width has hit the configured floor."""
    return width < config.configured_item_width and width == config.min_item_width


def compute_plan(
    geometry: PanelGeometry, item_count: int, config: LayoutConfig
) -> LayoutPlan:
    """
    Compose the row planner, size adapter and width shrinker into one plan.
    Args:
        geometry: Current panel height and container width.
        item_count: Number of visible buttons.
        config: Validated layout settings.
    Returns:
        A new LayoutPlan. Plans compare by value, so callers can skip
        redundant visual updates with a plain equality check.
    """
    if config.adaptive:
        rows = row_count(
            geometry.width, item_count, config.configured_item_width, config.max_rows
        )
    else:
        rows = max(1, config.max_rows)
    margin = config.vertical_margin
    if config.adaptive:
        icon = icon_size(geometry.height, rows, config.icon_override, margin)
        font = font_size(geometry.height, rows, margin, config.font_override)
    else:
        icon = fixed_icon_size(geometry.height, rows, config.icon_override, margin)
        font = max(0, config.font_override)
    width = effective_width(
        geometry.width,
        item_count,
        config.configured_item_width,
        config.max_rows,
        config.min_item_width,
    )
    return LayoutPlan(
        rows=rows,
        mode=layout_mode(rows),
        row_height=row_height(geometry.height, rows, margin),
        icon_size=icon,
        font_size=font,
        effective_item_width=width,
        icon_only_mode=is_icon_only(width, config),
    )
