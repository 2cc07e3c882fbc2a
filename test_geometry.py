"""Tests for rectangles, positions and sort keys."""

import pytest

from pdf_layout_processor.models.data_structures import Figure
from pdf_layout_processor.models.geometry import Rectangle, get_rectangle
from pdf_layout_processor.utils.comparators import (
    max_x_desc_key, max_x_key, max_y_desc_key, max_y_key, min_x_key, min_y_key
)


def test_rectangle_rounds_coordinates():
    rect = Rectangle(1.234, 5.678, 10.0, 20.0)
    assert rect.min_x == 1.23
    assert rect.min_y == 5.68
    assert rect.width == 8.77
    assert rect.height == 14.32


def test_inverted_rectangle_is_rejected():
    with pytest.raises(ValueError):
        Rectangle(10, 0, 0, 10)
    assert Rectangle.try_create(0, 10, 10, 0) is None
    assert Rectangle.try_create(0, 0, 10, 10) == Rectangle(0, 0, 10, 10)


def test_union_and_overlaps():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(10, 10, 20, 20)
    c = Rectangle(30, 30, 40, 40)

    assert a.union(b) == Rectangle(0, 0, 20, 20)
    assert a.union(None) == a
    # touching rectangles overlap
    assert a.overlaps(b)
    assert not a.overlaps(c)
    assert not a.overlaps(None)
    assert a.union(c).contains(b)


def test_from_elements_skips_missing_geometry():
    elements = [Figure(Rectangle(0, 0, 5, 5)), Figure(None), None, Figure(Rectangle(10, 2, 12, 20))]
    assert Rectangle.from_elements(elements) == Rectangle(0, 0, 12, 20)
    assert Rectangle.from_elements([Figure(None), None]) is None
    assert Rectangle.from_elements([]) is None


def test_get_rectangle():
    rect = Rectangle(0, 0, 1, 1)
    assert get_rectangle(rect) is rect
    assert get_rectangle(Figure(rect)) is rect
    assert get_rectangle(None) is None


def test_missing_geometry_sorts_last():
    a = Figure(Rectangle(5, 5, 6, 6))
    b = Figure(Rectangle(1, 1, 2, 2))
    missing = Figure(None)

    assert sorted([missing, a, b], key=min_x_key) == [b, a, missing]
    assert sorted([a, missing, b], key=min_y_key) == [b, a, missing]
    assert sorted([missing, b, a], key=max_y_desc_key) == [a, b, missing]


def test_sort_keys_by_far_edges():
    narrow = Figure(Rectangle(0, 0, 5, 5))
    wide = Figure(Rectangle(0, 0, 20, 30))
    missing = Figure(None)

    assert sorted([wide, missing, narrow], key=max_x_key) == [narrow, wide, missing]
    assert sorted([missing, narrow, wide], key=max_y_key) == [narrow, wide, missing]
    assert sorted([narrow, missing, wide], key=max_x_desc_key) == [wide, narrow, missing]
