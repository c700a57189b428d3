"""Planar geometry helpers shared by the primitives and the tessellation tests.

Functions accept any point-like pair (``Point2``, tuple or length-2 array) and
keep the scalar type of their inputs where NumPy allows it.
"""
from __future__ import annotations
import math
import numpy as np
from .constants import EPS_AREA, EPS_COLINEAR

__all__ = [
	'orient','triangle_area','is_degenerate_triangle','ellipse_residual','fan_signed_area',
	'polygon_signed_area'
]

def orient(a, b, c):
	"""2D orientation (signed area * 2) for points a,b,c.

	Returns a positive value when (a,b,c) are counter-clockwise, negative when clockwise,
	and zero when colinear.
	"""
	return (b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0])

def triangle_area(p0, p1, p2):
	"""Signed area of triangle p0,p1,p2 (positive for counter-clockwise)."""
	return 0.5 * orient(p0, p1, p2)

def is_degenerate_triangle(p0, p1, p2, eps=EPS_AREA):
	return abs(triangle_area(p0, p1, p2)) <= eps

def ellipse_residual(point, center, half_w, half_h):
	"""Residual of the implicit ellipse equation at ``point``.

	Returns ((x-cx)/half_w)^2 + ((y-cy)/half_h)^2 - 1, which is ~0 for points on
	the boundary. Degenerate axes (|half extent| below EPS_COLINEAR) have no
	implicit form; NaN is returned so callers can skip such ellipses explicitly.
	"""
	if abs(half_w) <= EPS_COLINEAR or abs(half_h) <= EPS_COLINEAR:
		return math.nan
	dx = (float(point[0]) - float(center[0])) / float(half_w)
	dy = (float(point[1]) - float(center[1])) / float(half_h)
	return dx*dx + dy*dy - 1.0

def fan_signed_area(triangles):
	"""Sum of signed areas over an iterable of vertex triplets.

	For a closed counter-clockwise fan this approaches the ellipse area pi*a*b
	from below as the resolution grows.
	"""
	total = 0.0
	for tri in triangles:
		total += float(triangle_area(tri[0], tri[1], tri[2]))
	return total

def polygon_signed_area(points):
	"""Shoelace signed area of a (possibly closed) point sequence."""
	pts = np.asarray([(float(p[0]), float(p[1])) for p in points], dtype=np.float64)
	if pts.shape[0] < 3:
		return 0.0
	x = pts[:, 0]; y = pts[:, 1]
	return 0.5 * float(np.sum(x*np.roll(y, -1) - np.roll(x, -1)*y))
