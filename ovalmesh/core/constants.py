"""Central numerical tolerances and small geometry constants.

This module centralizes tiny numeric thresholds and the fixed angular
constants used across the codebase so they can be tuned consistently and
referenced without scattering literals.
"""
from __future__ import annotations

import math

# Angular constants
TAU: float = 2.0 * math.pi        # one full turn in radians

# Resolution (number of polygon sides)
MIN_RESOLUTION: int = 1           # smallest resolution ever used for stepping
DEFAULT_RESOLUTION: int = 64      # resolution used when a config does not say

# Geometry tolerances
EPS_BOUNDARY: float = 1e-9        # |residual| allowed when checking on-boundary points
EPS_AREA: float = 1e-12           # minimum positive (absolute) triangle area
EPS_COLINEAR: float = 1e-15       # near-colinearity threshold for orientation tests

__all__ = [
    'TAU',
    'MIN_RESOLUTION',
    'DEFAULT_RESOLUTION',
    'EPS_BOUNDARY',
    'EPS_AREA',
    'EPS_COLINEAR',
]
