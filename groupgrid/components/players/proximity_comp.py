"""Proximity predicate used by the grouping engine."""

from __future__ import annotations


def is_nearby(x1: float, y1: float, x2: float, y2: float, threshold: float) -> bool:
    """
    Check whether two points fall in each other's square neighbourhood.

    Both axes must differ by strictly less than threshold; points exactly
    threshold apart on either axis are not nearby.
    """
    return abs(x1 - x2) < threshold and abs(y1 - y2) < threshold
