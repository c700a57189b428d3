"""Lazy polygon approximations of ellipses and elliptical sections.

:class:`Circumference` walks the boundary of an ellipse in equal angular
steps and yields ``Point2`` values; :class:`Triangles` pairs consecutive
boundary points with the ellipse centre to yield a closed triangle fan.
:class:`Ellipse` and :class:`Section` only hold parameters and build those
iterators on demand.

A full turn at resolution ``r`` yields ``r + 1`` points: the last point
revisits the starting angle so the fan closes without a gap, giving ``r``
triangles.

Example
-------
    >>> from ovalmesh import Ellipse, Rect
    >>> e = Ellipse(Rect.from_w_h(2.0, 2.0), resolution=4)
    >>> len(e.circumference()), len(e.triangles())
    (5, 4)
"""
from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Iterator, Optional

import numpy as np

from .config import TessellationConfig
from .constants import DEFAULT_RESOLUTION, MIN_RESOLUTION, TAU
from .geometry import ellipse_residual
from .logging_utils import get_logger
from .primitives import Point2, Rect, Tri
from .scalar import cast, resolve_dtype

logger = get_logger('ovalmesh.ellipse')

__all__ = [
    'Circumference', 'Triangles', 'Ellipse', 'Section', 'clamp_resolution',
    'boundary_deviation', 'check_boundary',
]


def clamp_resolution(resolution: int) -> int:
    """Return ``resolution`` raised to at least ``MIN_RESOLUTION``.

    A zero resolution would divide the angular span by zero and turn every
    generated coordinate into NaN. Negative counts are rejected.
    """
    res = operator.index(resolution)
    if res < 0:
        raise ValueError(f"resolution must be >= 0, got {res}")
    if res < MIN_RESOLUTION:
        logger.debug("resolution %d clamped to %d", res, MIN_RESOLUTION)
        return MIN_RESOLUTION
    return res


class Circumference:
    """Iterator yielding points on the boundary of an ellipse or of an arc of it.

    The point at cursor position ``i`` is at angle ``rad_offset + rad_step * i``::

        (center.x + half_w * cos(angle), center.y + half_h * sin(angle))

    ``len()`` is always the exact number of points left. A consumed instance
    stays exhausted; build a new one (or :meth:`copy` one before consuming)
    to walk the boundary again. ``with_span``, ``with_offset`` and
    ``triangles`` never modify the receiver.
    """

    __slots__ = ('_index', '_num_points', '_middle', '_rad_step', '_rad_offset',
                 '_half_w', '_half_h', '_dtype')

    def __init__(self, rect: Rect, num_points: int, rad_step, *, rad_offset=0.0, dtype=None):
        dt = resolve_dtype(dtype)
        n = operator.index(num_points)
        if n < 0:
            raise ValueError(f"num_points must be >= 0, got {n}")
        # The largest index must map to a finite scalar in this dtype.
        cast(max(n - 1, 0), dt)
        x, y, w, h = rect.x_y_w_h()
        two = cast(2, dt)
        self._index = 0
        self._num_points = n
        self._middle = Point2(cast(x, dt), cast(y, dt))
        self._half_w = cast(w, dt) / two
        self._half_h = cast(h, dt) / two
        self._rad_step = cast(rad_step, dt, allow_nonfinite=True)
        self._rad_offset = cast(rad_offset, dt, allow_nonfinite=True)
        self._dtype = dt

    @classmethod
    def full(cls, rect: Rect, resolution: int, dtype=None) -> 'Circumference':
        """Whole boundary as ``resolution`` sides, i.e. ``resolution + 1`` points."""
        return cls.arc(rect, resolution, TAU, dtype=dtype)

    @classmethod
    def arc(cls, rect: Rect, resolution: int, span_radians, dtype=None) -> 'Circumference':
        """Arc of ``span_radians`` starting at angle 0, split into ``resolution`` steps.

        Spans larger than a full turn or negative spans are stepped as given.
        """
        dt = resolve_dtype(dtype)
        res = clamp_resolution(resolution)
        rad_step = cast(span_radians, dt, allow_nonfinite=True) / cast(res, dt)
        return cls(rect, res + 1, rad_step, dtype=dt)

    def _derive(self, **changes: Any) -> 'Circumference':
        clone = object.__new__(type(self))
        for name in Circumference.__slots__:
            setattr(clone, name, getattr(self, name))
        for name, value in changes.items():
            setattr(clone, '_' + name, value)
        return clone

    def copy(self) -> 'Circumference':
        """Independent cursor at the same position."""
        return self._derive()

    __copy__ = copy

    def with_span(self, span_radians) -> 'Circumference':
        """Same number of points spread over ``span_radians`` instead.

        The step is re-derived from the existing point count, so a full-turn
        sequence can be narrowed to a section without changing its length.
        """
        resolution = max(self._num_points - 1, MIN_RESOLUTION)
        rad_step = cast(span_radians, self._dtype, allow_nonfinite=True) / cast(resolution, self._dtype)
        logger.debug("span %r over %d steps -> step %r", span_radians, resolution, rad_step)
        return self._derive(rad_step=rad_step)

    def with_offset(self, radians) -> 'Circumference':
        """Start the walk at ``radians`` instead of 0; step and length are kept."""
        return self._derive(rad_offset=cast(radians, self._dtype, allow_nonfinite=True))

    def triangles(self) -> 'Triangles':
        """Fan of triangles joining the remaining boundary points to the centre."""
        return Triangles(self)

    @property
    def center(self) -> Point2:
        return self._middle

    @property
    def half_w(self):
        return self._half_w

    @property
    def half_h(self):
        return self._half_h

    @property
    def rad_step(self):
        return self._rad_step

    @property
    def rad_offset(self):
        return self._rad_offset

    @property
    def num_points(self) -> int:
        return self._num_points

    @property
    def index(self) -> int:
        return self._index

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def _angle(self, index: int):
        return self._rad_offset + self._rad_step * self._dtype.type(index)

    def angles(self) -> Iterator[Any]:
        """Angles of the points not yet yielded, without advancing the cursor."""
        return (self._angle(i) for i in range(self._index, self._num_points))

    def __iter__(self) -> 'Circumference':
        return self

    def __next__(self) -> Point2:
        if self._index >= self._num_points:
            raise StopIteration
        angle = self._angle(self._index)
        x = self._middle.x + self._half_w * np.cos(angle)
        y = self._middle.y + self._half_h * np.sin(angle)
        self._index += 1
        return Point2(x, y)

    def __len__(self) -> int:
        return self._num_points - self._index

    def __length_hint__(self) -> int:
        return len(self)

    def __repr__(self) -> str:
        return (f"Circumference(index={self._index}, num_points={self._num_points}, "
                f"center=({self._middle.x!r}, {self._middle.y!r}), half_w={self._half_w!r}, "
                f"half_h={self._half_h!r}, rad_step={self._rad_step!r}, "
                f"rad_offset={self._rad_offset!r}, dtype={self._dtype})")


class Triangles:
    """Iterator yielding ``Tri(center, previous, current)`` for consecutive boundary points.

    Construction advances a private copy of ``points`` once to seed the first
    edge; when ``points`` is already exhausted the seed falls back to the
    centre and the fan is empty.
    """

    __slots__ = ('_last', '_points')

    def __init__(self, points: Circumference):
        points = points.copy()
        self._last = next(points, points.center)
        self._points = points

    @property
    def center(self) -> Point2:
        return self._points.center

    @property
    def last(self) -> Point2:
        """Most recently consumed boundary point."""
        return self._last

    def copy(self) -> 'Triangles':
        clone = object.__new__(type(self))
        clone._last = self._last
        clone._points = self._points.copy()
        return clone

    __copy__ = copy

    def __iter__(self) -> 'Triangles':
        return self

    def __next__(self) -> Tri:
        nxt = next(self._points, None)
        if nxt is None:
            raise StopIteration
        tri = Tri(self._points.center, self._last, nxt)
        self._last = nxt
        return tri

    def __len__(self) -> int:
        return len(self._points)

    def __length_hint__(self) -> int:
        return len(self)

    def __repr__(self) -> str:
        return f"Triangles(last={self._last!r}, points={self._points!r})"


@dataclass(frozen=True)
class Ellipse:
    """Ellipse inscribed in ``rect`` and approximated by ``resolution`` sides."""
    rect: Rect
    resolution: int = DEFAULT_RESOLUTION
    dtype: Any = 'float64'

    def __post_init__(self):
        res = operator.index(self.resolution)
        if res < 0:
            raise ValueError(f"resolution must be >= 0, got {res}")
        resolve_dtype(self.dtype)

    @classmethod
    def from_config(cls, rect: Rect, config: Optional[TessellationConfig] = None) -> 'Ellipse':
        cfg = (config or TessellationConfig()).validate()
        return cls(rect, cfg.resolution, cfg.dtype)

    @classmethod
    def circle(cls, center, radius, resolution: int = DEFAULT_RESOLUTION, dtype: Any = 'float64') -> 'Ellipse':
        cx, cy = center
        return cls(Rect(cx, cy, 2 * radius, 2 * radius), resolution, dtype)

    def section(self, offset_radians, section_radians) -> 'Section':
        """Angular slice starting at ``offset_radians`` and spanning ``section_radians``."""
        return Section(self, offset_radians, section_radians)

    def circumference(self) -> Circumference:
        return Circumference.full(self.rect, self.resolution, dtype=self.dtype)

    def triangles(self) -> Triangles:
        """Closed fan of ``resolution`` triangles, each ``(center, previous, current)``."""
        return self.circumference().triangles()


@dataclass(frozen=True)
class Section:
    """Slice ``[offset_radians, offset_radians + section_radians]`` of ``ellipse``.

    The slice keeps the ellipse resolution as its number of steps.
    """
    ellipse: Ellipse
    offset_radians: float
    section_radians: float

    def circumference(self) -> Circumference:
        return (self.ellipse.circumference()
                .with_span(self.section_radians)
                .with_offset(self.offset_radians))

    def triangles(self) -> Triangles:
        return self.circumference().triangles()


def boundary_deviation(points: Circumference) -> float:
    """Largest |residual| of the implicit ellipse equation over the remaining points.

    Works on a copy, so ``points`` is not advanced. Returns 0.0 for an empty
    sequence and NaN when the ellipse is degenerate (a zero half extent).
    """
    worst = 0.0
    center, half_w, half_h = points.center, points.half_w, points.half_h
    for p in points.copy():
        r = ellipse_residual(p, center, half_w, half_h)
        if math.isnan(r):
            return math.nan
        worst = max(worst, abs(r))
    return worst


def check_boundary(points: Circumference, config: Optional[TessellationConfig] = None) -> bool:
    """True when every remaining point is within ``config.boundary_tolerance`` of the ellipse.

    Degenerate ellipses have no implicit form and always pass.
    """
    cfg = (config or TessellationConfig()).validate()
    dev = boundary_deviation(points)
    if math.isnan(dev):
        return True
    if dev > cfg.boundary_tolerance:
        logger.debug("boundary deviation %g exceeds tolerance %g", dev, cfg.boundary_tolerance)
        return False
    return True
