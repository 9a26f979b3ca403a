# gprbf/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gprbf.core` modules.

Shape/type validation and conversion helpers for (xi, zi, xt).
"""
import gprbf.num as gnp
from gprbf.errors import DimensionMismatch


def _to_vector(name, a, convert):
    if convert:
        a = gnp.asarray(a, dtype=gnp.get_dtype())
    if a.ndim == 0:
        a = a.reshape(1)
    elif a.ndim == 2 and a.shape[1] == 1:
        a = a.reshape(-1)  # (n,1) -> (n,)
    elif a.ndim != 1:
        raise DimensionMismatch(f"{name} should be 1D or a 2D column array, got shape {a.shape}")
    if not gnp.all(gnp.isfinite(a)):
        raise ValueError(f"{name} contains non-finite values")
    return a


def ensure_shapes_and_type(*, xi=None, zi=None, xt=None, convert: bool = True):
    """Validate and adjust shapes/types of input arrays.

    Parameters
    ----------
    xi : array_like, optional
        Observation points, (n,) or (n, 1).
    zi : array_like, optional
        Observed values, (n,) or (n, 1).
    xt : array_like, optional
        Prediction points, (m,) or (m, 1).
    convert : bool, optional
        Convert arrays to float arrays of the working dtype (default True).

    Returns
    -------
    tuple
        (xi, zi, xt) as 1D arrays (None entries are passed through).

    Raises
    ------
    DimensionMismatch
        If an input is not one-dimensional, or if xi and zi have
        different lengths.
    ValueError
        If an input contains NaN or inf.
    """
    if xi is not None:
        xi = _to_vector("xi", xi, convert)
    if zi is not None:
        zi = _to_vector("zi", zi, convert)
    if xt is not None:
        xt = _to_vector("xt", xt, convert)

    if xi is not None and zi is not None and xi.shape[0] != zi.shape[0]:
        raise DimensionMismatch(
            f"xi and zi must have the same length, got {xi.shape[0]} and {zi.shape[0]}"
        )

    return xi, zi, xt
