"""Integer points, segment intersection and polygon area."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point (or vector) with integer coordinates."""

    x: int
    y: int

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def cross(self, other: Point) -> int:
        """Cross product of two vectors."""
        return self.x * other.y - other.x * self.y

    def triangle(self, b: Point, c: Point) -> int:
        """Twice the signed area of the triangle (self, b, c)."""
        return (b - self).cross(c - self)


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Whether the closed segments p1-p2 and p3-p4 share a point."""
    pairs = (((p1, p2), (p3, p4)), ((p3, p4), (p1, p2)))
    if (p2 - p1).cross(p4 - p3) == 0:
        if p1.triangle(p2, p3) != 0:
            return False
        for (a1, a2), (b1, b2) in pairs:
            if max(a1.x, a2.x) < min(b1.x, b2.x) or max(a1.y, a2.y) < min(b1.y, b2.y):
                return False
        return True
    for (a1, a2), (b1, b2) in pairs:
        sign1 = a1.triangle(a2, b1)
        sign2 = a1.triangle(a2, b2)
        if (sign1 < 0 and sign2 < 0) or (sign1 > 0 and sign2 > 0):
            return False
    return True


def polygon_area(points: Iterable[Point]) -> float:
    """Area of a simple polygon given by its vertices in order."""
    vertices = list(points)
    twice = sum(a.cross(b) for a, b in zip(vertices, vertices[1:] + vertices[:1]))
    return abs(twice) / 2


def main(argv: list[str] | None = None) -> int:
    """Read a vertex count and vertices, then print the polygon's area.

    Input comes from the file named by the first argument, or standard input.
    """
    args = sys.argv[1:] if argv is None else argv
    if args:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
        vertices = [Point(int(next(tokens)), int(next(tokens))) for _ in range(count)]
    except StopIteration:
        raise ValueError("input ended before all vertices were read") from None
    print(format(polygon_area(vertices), "g"))
    return 0