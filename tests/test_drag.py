from multirow.core.drag import nearest_index
from multirow.core.geometry import Rect

TWO_ROWS = [
    Rect(0, 0, 150, 30),
    Rect(150, 0, 150, 30),
    Rect(0, 30, 150, 30),
    Rect(150, 30, 150, 30),
]

SINGLE_ROW = [(0, 0, 100, 30), (100, 0, 100, 30), (200, 0, 100, 30)]


def test_empty_returns_minus_one():
    assert nearest_index([], 100, 15, False) == -1


def test_single_button():
    assert nearest_index([(0, 0, 100, 30)], 200, 15, False) == 0


def test_single_row():
    assert nearest_index(SINGLE_ROW, 40, 15, False) == 0
    assert nearest_index(SINGLE_ROW, 160, 15, False) == 1
    assert nearest_index(SINGLE_ROW, 260, 15, False) == 2
    assert nearest_index(SINGLE_ROW, 90, 15, False) == 0


def test_tie_goes_to_first_seen():
    assert nearest_index(SINGLE_ROW, 100, 15, False) == 0


def test_cursor_in_second_row_finds_second_row_button():
    assert nearest_index(TWO_ROWS, 75, 40, False) == 2
    assert nearest_index(TWO_ROWS, 225, 40, False) == 3
    assert nearest_index(TWO_ROWS, 10, 35, False) == 2
    assert nearest_index(TWO_ROWS, 75, 45, False) == 2


def test_cursor_in_first_row():
    assert nearest_index(TWO_ROWS, 75, 10, False) == 0
    assert nearest_index(TWO_ROWS, 225, 10, False) == 1
    assert nearest_index(TWO_ROWS, 75, 20, False) == 0
    assert nearest_index(TWO_ROWS, 75, 35, False) == 2


def test_three_rows():
    rects = [Rect((i % 2) * 150, (i // 2) * 20, 150, 20) for i in range(6)]
    assert nearest_index(rects, 75, 48, False) == 4


def test_vertical_panel():
    rects = [(0, 0, 60, 30), (0, 30, 60, 30), (0, 60, 60, 30)]
    assert nearest_index(rects, 30, 50, True) == 1


def test_partial_last_row_nearest_button_wins():
    rects = TWO_ROWS[:3]
    assert nearest_index(rects, 75, 40, False) == 2
    assert nearest_index(rects, 225, 40, False) == 1


def test_vertical_flag_does_not_change_the_metric():
    for x, y in [(75, 40), (225, 40), (10, 35), (75, 20), (225, 10), (150, 30)]:
        assert nearest_index(TWO_ROWS, x, y, True) == nearest_index(TWO_ROWS, x, y, False)
