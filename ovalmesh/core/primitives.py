"""Value types exchanged with the tessellation iterators.

``Point2`` and ``Tri`` are plain named tuples so generated geometry can be
unpacked, indexed or fed straight into ``numpy.asarray``. ``Rect`` is the
centre-based bounding rectangle an ``Ellipse`` is inscribed in.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Tuple

from .geometry import triangle_area


class Point2(NamedTuple):
    x: Any
    y: Any


class Tri(NamedTuple):
    """Three vertices kept in construction order.

    Fans produced by :class:`~ovalmesh.core.ellipse.Triangles` always use the
    order ``(center, previous boundary point, current boundary point)``.
    """
    a: Point2
    b: Point2
    c: Point2

    def centroid(self) -> Point2:
        return Point2((self.a.x + self.b.x + self.c.x) / 3,
                      (self.a.y + self.b.y + self.c.y) / 3)

    def signed_area(self):
        """Positive when a, b, c wind counter-clockwise."""
        return triangle_area(self.a, self.b, self.c)

    def area(self):
        return abs(self.signed_area())


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle described by its centre and its extents.

    Attributes
    ----------
    x, y : float
        Centre of the rectangle.
    w, h : float
        Width and height. Zero is allowed (degenerate), negative is not.
    """
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Rect extents must be non-negative, got w={self.w!r} h={self.h!r}")

    @classmethod
    def from_x_y_w_h(cls, x, y, w, h) -> 'Rect':
        return cls(x, y, w, h)

    @classmethod
    def from_w_h(cls, w, h) -> 'Rect':
        """Rectangle of the given size centred on the origin."""
        return cls(0.0, 0.0, w, h)

    @classmethod
    def from_corners(cls, a, b) -> 'Rect':
        """Rectangle spanning two opposite corners given in any order."""
        (ax, ay), (bx, by) = a, b
        return cls((ax + bx) / 2, (ay + by) / 2, abs(bx - ax), abs(by - ay))

    def x_y_w_h(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.w, self.h

    def xy(self) -> Point2:
        return Point2(self.x, self.y)

    @property
    def left(self):
        return self.x - self.w / 2

    @property
    def right(self):
        return self.x + self.w / 2

    @property
    def bottom(self):
        return self.y - self.h / 2

    @property
    def top(self):
        return self.y + self.h / 2


__all__ = ['Point2', 'Tri', 'Rect']
