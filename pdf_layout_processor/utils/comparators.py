"""Sort keys for positioned elements.

Every key places elements without geometry after all positioned elements,
in both ascending and descending orderings.
"""

from typing import Tuple

from ..models.geometry import get_rectangle


def min_x_key(element) -> Tuple[bool, float]:
    rect = get_rectangle(element)
    return (rect is None, rect.min_x if rect else 0.0)


def max_x_key(element) -> Tuple[bool, float]:
    rect = get_rectangle(element)
    return (rect is None, rect.max_x if rect else 0.0)


def min_y_key(element) -> Tuple[bool, float]:
    rect = get_rectangle(element)
    return (rect is None, rect.min_y if rect else 0.0)


def max_y_key(element) -> Tuple[bool, float]:
    rect = get_rectangle(element)
    return (rect is None, rect.max_y if rect else 0.0)


def max_x_desc_key(element) -> Tuple[bool, float]:
    """Key for sorting by descending max X (right to left)."""
    rect = get_rectangle(element)
    return (rect is None, -rect.max_x if rect else 0.0)


def max_y_desc_key(element) -> Tuple[bool, float]:
    """Key for sorting by descending max Y (top to bottom)."""
    rect = get_rectangle(element)
    return (rect is None, -rect.max_y if rect else 0.0)
