import copy

import pytest

from codekata.box import Box


def test_str_lists_dimensions():
    assert str(Box(3, 4, 5)) == "3 4 5"


def test_default_box_is_empty():
    box = Box()
    assert str(box) == "0 0 0"
    assert box.volume() == 0


def test_volume_does_not_overflow():
    side = 10**6
    assert Box(side, side, side).volume() == side**3


def test_volume_is_product_invariant_under_rotation():
    assert Box(2, 3, 7).volume() == Box(7, 2, 3).volume()


@pytest.mark.parametrize(
    "smaller,larger",
    [
        (Box(1, 9, 9), Box(2, 0, 0)),
        (Box(1, 2, 9), Box(1, 3, 0)),
        (Box(1, 2, 3), Box(1, 2, 4)),
    ],
)
def test_ordering(smaller, larger):
    assert smaller < larger
    assert not larger < smaller


def test_equal_boxes_are_not_less():
    first = Box(1, 2, 3)
    second = Box(1, 2, 3)
    assert (first < second) is False
    assert (second < first) is False
    assert first == second


def test_copy_is_equal():
    box = Box(4, 5, 6)
    assert copy.copy(box) == box


def test_sorting_uses_ordering():
    boxes = [Box(2, 1, 1), Box(1, 5, 5), Box(1, 5, 2)]
    assert sorted(boxes) == [Box(1, 5, 2), Box(1, 5, 5), Box(2, 1, 1)]