import dataclasses
import pytest
from multirow.core.geometry import PanelGeometry
from multirow.core.plan import LayoutConfig, LayoutPlan, compute_plan, is_icon_only


def test_twenty_items_in_two_rows():
    plan = compute_plan(PanelGeometry(height=60, width=938), 20, LayoutConfig())
    assert plan == LayoutPlan(
        rows=2,
        mode="compact",
        row_height=30,
        icon_size=12,
        font_size=8,
        effective_item_width=93,
        icon_only_mode=False,
    )


def test_single_row_is_spacious():
    plan = compute_plan(PanelGeometry(height=60, width=938), 4, LayoutConfig())
    assert plan.rows == 1
    assert plan.mode == "spacious"
    assert plan.font_size == 0
    assert plan.icon_size == 15
    assert plan.effective_item_width == 150


def test_icon_only_when_width_hits_floor():
    plan = compute_plan(PanelGeometry(height=60, width=938), 50, LayoutConfig())
    assert plan.effective_item_width == 50
    assert plan.icon_only_mode is True


def test_is_icon_only_requires_a_shrink():
    config = LayoutConfig(configured_item_width=50, min_item_width=50)
    assert is_icon_only(50, config) is False
    assert is_icon_only(50, LayoutConfig()) is True
    assert is_icon_only(93, LayoutConfig()) is False


def test_overrides_bypass_heuristics():
    config = LayoutConfig(icon_override=16, font_override=18)
    plan = compute_plan(PanelGeometry(height=60, width=938), 20, config)
    assert plan.icon_size == 16
    assert plan.font_size == 18


def test_vertical_margin_shrinks_rows():
    config = LayoutConfig(vertical_margin=4)
    plan = compute_plan(PanelGeometry(height=60, width=938), 20, config)
    assert plan.row_height == 26


def test_fixed_rows_always_use_max_rows():
    config = LayoutConfig(max_rows=3, adaptive=False)
    plan = compute_plan(PanelGeometry(height=96, width=938), 1, config)
    assert plan.rows == 3
    assert plan.mode == "compact"
    assert plan.icon_size == 24
    assert plan.font_size == 0


def test_zero_width_during_resize_degrades_to_one_row():
    plan = compute_plan(PanelGeometry(height=60, width=0), 12, LayoutConfig())
    assert plan.rows == 1
    assert plan.effective_item_width == 150


def test_plan_is_immutable():
    plan = compute_plan(PanelGeometry(height=60, width=938), 3, LayoutConfig())
    with pytest.raises(dataclasses.FrozenInstanceError):
        plan.rows = 2


def test_plan_invariants_over_input_grid():
    for max_rows in range(1, 5):
        config = LayoutConfig(max_rows=max_rows)
        for height in (24, 40, 60, 96, 128):
            for width in (0, 300, 938, 1920):
                for count in range(0, 40, 3):
                    plan = compute_plan(PanelGeometry(height, width), count, config)
                    assert 1 <= plan.rows <= max_rows
                    assert (plan.rows == 1) == (plan.mode == "spacious")
                    assert 50 <= plan.effective_item_width <= 150
                    assert plan.icon_size >= 12
                    assert plan.font_size == 0 or 6 <= plan.font_size <= 10
