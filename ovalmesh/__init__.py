"""Public package API for ovalmesh.

Lazy polygon and triangle-fan approximations of ellipses, circles and
elliptical sections, generated point by point at a chosen resolution.

Example
-------
    from ovalmesh import Ellipse, Rect

    ellipse = Ellipse(Rect.from_w_h(4.0, 2.0), resolution=32)
    for tri in ellipse.triangles():
        ...

The deeper modules (``ovalmesh.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import PackageNotFoundError as _NotFound, version as _pkg_version
    __version__ = _pkg_version("ovalmesh")  # populated when installed
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('ovalmesh.core.constants')
_scalar = _imp('ovalmesh.core.scalar')
_geom = _imp('ovalmesh.core.geometry')
_prim = _imp('ovalmesh.core.primitives')
_conf = _imp('ovalmesh.core.config')
_ell = _imp('ovalmesh.core.ellipse')
_log = _imp('ovalmesh.core.logging_utils')

# Tessellation
Ellipse = _ell.Ellipse
Section = _ell.Section
Circumference = _ell.Circumference
Triangles = _ell.Triangles
clamp_resolution = _ell.clamp_resolution
boundary_deviation = _ell.boundary_deviation
check_boundary = _ell.check_boundary

# Value types
Point2 = _prim.Point2
Tri = _prim.Tri
Rect = _prim.Rect

# Configuration, scalars and logging
TessellationConfig = _conf.TessellationConfig
ScalarConversionError = _scalar.ScalarConversionError
configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Constants
TAU = _const.TAU
MIN_RESOLUTION = _const.MIN_RESOLUTION
DEFAULT_RESOLUTION = _const.DEFAULT_RESOLUTION
EPS_BOUNDARY = _const.EPS_BOUNDARY
EPS_AREA = _const.EPS_AREA

# Namespace submodules for exploratory users
ellipse = _ell
geometry = _geom
primitives = _prim
config = _conf
constants = _const
scalar = _scalar

__all__ = [
    '__version__',
    # tessellation
    'Ellipse', 'Section', 'Circumference', 'Triangles', 'clamp_resolution',
    'boundary_deviation', 'check_boundary',
    # value types
    'Point2', 'Tri', 'Rect',
    # configuration / errors / logging
    'TessellationConfig', 'ScalarConversionError', 'configure_logging', 'get_logger',
    # constants
    'TAU', 'MIN_RESOLUTION', 'DEFAULT_RESOLUTION', 'EPS_BOUNDARY', 'EPS_AREA',
    # submodules / namespaces
    'ellipse', 'geometry', 'primitives', 'config', 'constants', 'scalar',
]
