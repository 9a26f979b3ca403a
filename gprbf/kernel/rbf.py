# gprbf/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
RBF (squared exponential) kernel on the real line.

.. math::
    k(a, b) = \\exp\\left(-\\frac{(a - b)^2}{w}\\right)

where :math:`w > 0` is the kernel width. Note that the width divides
the squared distance directly; there is no factor 2 and no variance
parameter, so that :math:`k(a, a) = 1`.
"""
import math
import gprbf.num as gnp
from gprbf.errors import InvalidHyperparameter, DimensionMismatch


def check_kernel_width(width):
    """Return `width` as a float, or raise InvalidHyperparameter."""
    try:
        w = float(width)
    except (TypeError, ValueError) as exc:
        raise InvalidHyperparameter(f"kernel_width must be a real number, got {width!r}") from exc
    if not math.isfinite(w) or w <= 0.0:
        raise InvalidHyperparameter(f"kernel_width must be finite and > 0, got {w}")
    return w


def rbf_kernel(a, b, width=2.0):
    """RBF kernel value between `a` and `b`.

    Parameters
    ----------
    a, b : float or gnp.array
        Inputs; arrays are combined elementwise (with broadcasting).
    width : float, optional
        Kernel width, > 0 (default 2.0).

    Returns
    -------
    float or gnp.array
        Kernel values in (0, 1]; far-apart points may underflow to 0.

    Raises
    ------
    InvalidHyperparameter
        If `width` is not a finite positive number.
    """
    w = check_kernel_width(width)
    if gnp.isscalar(a) and gnp.isscalar(b):
        return math.exp(-((a - b) ** 2) / w)
    return gnp.exp(-((gnp.asarray(a) - gnp.asarray(b)) ** 2) / w)


def rbf_covariance_ii_or_tt(x, width, pairwise=False):
    """Covariance of x with itself.

    Only the upper triangle is evaluated; the matrix is mirrored from
    it, hence exactly symmetric with a unit diagonal.

    Parameters
    ----------
    x : gnp.array, shape (n,)
    width : float
    pairwise : bool
        If True, return the diagonal as a (n,) vector.

    Returns
    -------
    gnp.array
        (n, n) matrix or (n,) vector if pairwise.
    """
    if pairwise:
        return gnp.ones((x.shape[0],))
    D = gnp.squared_distance_symmetric(x)
    return gnp.exp(-D / width)


def rbf_covariance_it(x, y, width, pairwise=False):
    """Cross-covariance between x and y.

    Parameters
    ----------
    x : gnp.array, shape (nx,)
    y : gnp.array, shape (ny,)
    width : float
    pairwise : bool
        If True, return elementwise k(x_i, y_i) (requires nx == ny).

    Returns
    -------
    gnp.array
        (nx, ny) matrix or (nx,) vector if pairwise.
    """
    if pairwise:
        if x.shape[0] != y.shape[0]:
            raise DimensionMismatch(
                f"pairwise covariance needs inputs of equal length, got {x.shape[0]} and {y.shape[0]}"
            )
        D = gnp.squared_distance_elementwise(x, y)
    else:
        D = gnp.squared_distance(x, y)
    return gnp.exp(-D / width)


def rbf_covariance(x, y, width, pairwise=False):
    """RBF covariance matrix. Wrapper.

    Entry (i, j) is ``rbf_kernel(x[i], y[j], width)``.

    Parameters
    ----------
    x : array_like, shape (nx,)
    y : array_like, shape (ny,), or None
        If None or the same object as `x`, the symmetric path is used.
    width : float
    pairwise : bool

    Returns
    -------
    gnp.array
    """
    w = check_kernel_width(width)
    if y is x or y is None:
        return rbf_covariance_ii_or_tt(_as_1d(x), w, pairwise)
    return rbf_covariance_it(_as_1d(x), _as_1d(y), w, pairwise)


def _as_1d(x):
    x = gnp.asarray(x)
    if x.ndim == 2 and x.shape[1] == 1:
        return x.reshape(-1)
    if x.ndim != 1:
        raise DimensionMismatch(f"inputs must be one-dimensional, got shape {x.shape}")
    return x
