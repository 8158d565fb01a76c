"""Orientation tests and segment intersection on integer points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    """A point ordered by x, then by y."""

    x: int
    y: int


@dataclass(frozen=True)
class Segment:
    """A closed line segment between two points."""

    start: Point
    end: Point


def ccw(p1: Point, p2: Point, p3: Point) -> int:
    """Return 1 for a counter-clockwise turn, -1 for clockwise, 0 if collinear."""
    cross = (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)
    return (cross > 0) - (cross < 0)


def segments_intersect(first: Segment, second: Segment) -> bool:
    """Whether two closed segments share at least one point."""
    side1 = ccw(first.start, first.end, second.start) * ccw(first.start, first.end, second.end)
    side2 = ccw(second.start, second.end, first.start) * ccw(second.start, second.end, first.end)
    if side1 == 0 and side2 == 0:
        a_low, a_high = sorted((first.start, first.end))
        b_low, b_high = sorted((second.start, second.end))
        return b_low <= a_high and a_low <= b_high
    return side1 <= 0 and side2 <= 0