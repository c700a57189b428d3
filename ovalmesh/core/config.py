"""Configuration objects for ellipse tessellation."""
from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from typing import Any

from .constants import DEFAULT_RESOLUTION, EPS_BOUNDARY
from .scalar import resolve_dtype


@dataclass(frozen=True)
class TessellationConfig:
    """Defaults applied when building ellipses from a config.

    Attributes
    ----------
    resolution : int
        Number of polygon sides for a full turn. 0 is accepted and clamped to
        1 when iterators are built.
    dtype : str or numpy dtype
        Floating scalar type of generated coordinates.
    boundary_tolerance : float
        Residual allowed when checking that points lie on the ellipse.
    """
    resolution: int = DEFAULT_RESOLUTION
    dtype: Any = 'float64'
    boundary_tolerance: float = EPS_BOUNDARY

    def validate(self) -> 'TessellationConfig':
        res = operator.index(self.resolution)
        if res < 0:
            raise ValueError(f"resolution must be >= 0, got {res}")
        resolve_dtype(self.dtype)
        if not self.boundary_tolerance >= 0:
            raise ValueError(f"boundary_tolerance must be >= 0, got {self.boundary_tolerance!r}")
        return self

    def with_overrides(self, **overrides: Any) -> 'TessellationConfig':
        return replace(self, **overrides).validate()


__all__ = ['TessellationConfig']
