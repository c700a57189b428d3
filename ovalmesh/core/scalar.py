"""Floating-point scalar contract backed by NumPy dtypes.

Every iterator in :mod:`ovalmesh.core.ellipse` is parametrised by a NumPy
floating dtype (``float16``, ``float32``, ``float64`` or ``longdouble``).
Stored parameters are converted once through :func:`cast` and all further
arithmetic stays in that dtype, so a ``float32`` ellipse yields ``float32``
coordinates end to end.

Conversions that the dtype cannot represent are configuration errors and
fail fast with :class:`ScalarConversionError` instead of leaking ``inf`` or
``nan`` into every generated point.
"""
from __future__ import annotations

from typing import Any

import numpy as np

DEFAULT_DTYPE = np.dtype(np.float64)


class ScalarConversionError(ValueError):
    """Raised when a value cannot be represented by the requested dtype."""


def resolve_dtype(dtype: Any = None) -> np.dtype:
    """Normalise ``dtype`` to a floating :class:`numpy.dtype`.

    ``None`` selects float64. Anything that is not a floating dtype raises
    ``TypeError``.
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise TypeError(f"not a numpy dtype: {dtype!r}") from exc
    if not np.issubdtype(dt, np.floating):
        raise TypeError(f"scalar dtype must be floating point, got {dt}")
    return dt


def cast(value: Any, dtype: Any = None, *, allow_nonfinite: bool = False) -> np.floating:
    """Convert ``value`` to a scalar of ``dtype``.

    Parameters
    ----------
    value : int, float or numpy scalar
        Value to convert. Strings are rejected even though NumPy would parse
        them.
    dtype : dtype-like, optional
        Target floating dtype (default float64).
    allow_nonfinite : bool, default=False
        Pass ``inf``/``nan`` inputs through instead of rejecting them. Finite
        inputs that overflow the dtype are rejected either way.

    Raises
    ------
    ScalarConversionError
        If the value is not numeric or does not fit the dtype.
    """
    dt = resolve_dtype(dtype)
    if isinstance(value, (str, bytes)):
        raise ScalarConversionError(f"cannot represent {value!r} as {dt}: not a number")
    try:
        finite_in = bool(np.isfinite(value))
        with np.errstate(over='ignore', invalid='ignore'):
            out = dt.type(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ScalarConversionError(f"cannot represent {value!r} as {dt}") from exc
    if np.isfinite(out):
        return out
    if not finite_in and allow_nonfinite:
        return out
    raise ScalarConversionError(f"cannot represent {value!r} as a finite {dt}")


__all__ = ['DEFAULT_DTYPE', 'ScalarConversionError', 'resolve_dtype', 'cast']
