# gprbf/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for gprbf.

This module defines the NumPy/SciPy implementation of the gprbf.num API.
"""

import builtins
from typing import Any, Optional, Union
from gprbf.config import get_config, init_backend, get_logger

Scalar = Union[int, float]
ArrayLike = Any

_gprbf_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.info("Using backend: %s", _gprbf_backend_)

_LINALG_ERROR_KEYWORDS = (
    "singular",
    "not positive definite",
    "not positive-definite",
    "cholesky",
    "decomposition",
    "factorization",
    "leading minor",
    "linalg",
    "lapack",
    "array must not contain infs or nans",
)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.dtype(_config.dtype).type
_config.dtype_resolved = _np_dtype

ndarray = NDArray[numpy.floating]
from numpy import (
    any,
    all,
    isscalar,
    isfinite,
    allclose,
    diag,
    abs,
    sqrt,
    exp,
    log,
    sum,
    mean,
    min,
    max,
    maximum,
    einsum,
    matmul,
    tril,
)
from numpy.linalg import eigvalsh, LinAlgError
from numpy import pi, inf
from numpy import finfo, float64
from scipy.linalg import cho_factor, cho_solve, solve_triangular
from scipy.spatial.distance import cdist, pdist, squareform

# ..................................................

eps = finfo(_np_dtype).eps
fmax = finfo(_np_dtype).max

# ..................................................

def _is_linalg_exception(exc: Exception) -> bool:
    if isinstance(exc, LinAlgError):
        return True
    msg = str(exc).lower()
    return builtins.any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.integer) or out.dtype == numpy.bool_:
        return out.astype(_np_dtype)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        if numpy.issubdtype(x.dtype, numpy.integer):
            return x.astype(_np_dtype)
        return x
    elif isinstance(x, (int, float)):
        return numpy.array([x], dtype=_np_dtype)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating) or numpy.issubdtype(
            out.dtype, numpy.integer
        ):
            return out.astype(_np_dtype, copy=False)
        return out

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)

def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )

# ..................................................

def _as_column(x: ArrayLike) -> ArrayLike:
    return numpy.reshape(x, (-1, 1))

def squared_distance(x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """(len(x), len(y)) matrix of squared differences between 1-D inputs."""
    if x.shape[0] == 0 or y.shape[0] == 0:
        return zeros((x.shape[0], y.shape[0]))
    return cdist(_as_column(x), _as_column(y), metric="sqeuclidean")

def squared_distance_symmetric(x: ArrayLike) -> ArrayLike:
    """Squared differences within x, computed on the upper triangle only.

    The condensed distances are mirrored by ``squareform``, so the
    result is exactly symmetric with a zero diagonal.
    """
    n = x.shape[0]
    if n < 2:
        return zeros((n, n))
    return squareform(pdist(_as_column(x), metric="sqeuclidean"))

def squared_distance_elementwise(x: ArrayLike, y: Optional[ArrayLike]) -> ArrayLike:
    if x is y or y is None:
        return zeros((x.shape[0],))
    return (x - y) ** 2

# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)

def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)

def rand(*shape: int) -> ArrayLike:
    return _np_rng.random(shape, dtype=_np_dtype)

def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
