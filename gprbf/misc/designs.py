## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2023, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import math
import numpy as np
import gprbf.num as gnp

RADIO_BOX = (0.0, 2.0 * math.pi)


def _check_box(box):
    lower, upper = float(box[0]), float(box[1])
    if not lower < upper:
        raise ValueError("box must satisfy lower < upper")
    return lower, upper


def regulargrid(n, box=RADIO_BOX):
    """
    Build a regular grid of n points on the interval box.

    Parameters
    ----------
    n : int
        Number of points.
    box : tuple, optional
        (lower, upper) bounds, default is (0, 2π).

    Returns
    -------
    numpy.ndarray
        Array of shape (n,), sorted, endpoints included.
    """
    lower, upper = _check_box(box)
    return gnp.linspace(lower, upper, int(n))


def randunif(n, box=RADIO_BOX):
    """
    Sorted uniform random sample of n points on the interval box.

    The sample is drawn from the gprbf random generator, see
    `gprbf.config.set_seed`.

    Parameters
    ----------
    n : int
        Number of points.
    box : tuple, optional
        (lower, upper) bounds, default is (0, 2π).

    Returns
    -------
    numpy.ndarray
        Array of shape (n,), sorted in increasing order.
    """
    lower, upper = _check_box(box)
    if n < 0:
        raise ValueError("n must be non-negative")
    x = lower + (upper - lower) * gnp.rand(int(n))
    return np.sort(x)


def mindist(x):
    """
    Smallest gap between two distinct points of a 1-D sample (inf if none).

    Exact duplicates are not counted. They make K(x, x) singular
    when the noise variance is zero.
    """
    x = np.sort(np.asarray(x, dtype=float).reshape(-1))
    gaps = np.diff(x)
    gaps = gaps[gaps > 0.0]
    return float(np.min(gaps)) if gaps.shape[0] > 0 else math.inf


def has_duplicates(x):
    """True if the 1-D sample x contains repeated values."""
    x = np.asarray(x, dtype=float).reshape(-1)
    return np.unique(x).shape[0] < x.shape[0]
