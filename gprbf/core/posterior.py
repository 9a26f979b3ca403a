# gprbf/core/posterior.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Posterior predictive distribution of a zero-mean GP with RBF kernel.

Given observations y at x with additive Gaussian noise of variance
σ², the posterior at query points z is

.. math::
    \\bar f_* = K(z, x) (K(x, x) + σ^2 I)^{-1} y,

    \\mathrm{cov}(f_*) = K(z, z) - K(z, x) (K(x, x) + σ^2 I)^{-1} K(x, z).

Both are computed from a single Cholesky factorization A = L Lᵀ of
the regularized matrix A = K(x, x) + σ² I (Rasmussen & Williams, 2006,
Algorithm 2.1):

    alpha = A^{-1} y,      mean = K(z, x) alpha,
    V = L^{-1} K(x, z),    cov  = K(z, z) - Vᵀ V.

Functions
---------
predict(x, y, z, hyperparams, return_type=0, zero_neg_variances=True)
    Posterior mean and variance (optionally covariance) at z.

condition(x, y, hyperparams)
    Factor the regularized matrix once and return a `Posterior` that
    can be evaluated at any number of query sets.
"""
import math
import warnings

import gprbf.num as gnp
from gprbf.config import get_config, get_logger
from gprbf.kernel import rbf_covariance
from .hyperparams import as_hyperparameters
from .linalg import CholeskySolver
from . import utils

_logger = get_logger()


class PosteriorResult:
    """Posterior mean, marginal variances and optional full covariance.

    Unpacks as ``mean, variance = result``. Attributes are read-only.

    Attributes
    ----------
    mean : ndarray, shape (m,)
    variance : ndarray, shape (m,) or None
        None when the predictor was called with ``return_type=-1``.
    covariance : ndarray, shape (m, m) or None
        Only set when the predictor was called with ``return_type=1``.
    """

    __slots__ = ("_mean", "_variance", "_covariance")

    def __init__(self, mean, variance=None, covariance=None):
        self._mean = mean
        self._variance = variance
        self._covariance = covariance

    @property
    def mean(self):
        return self._mean

    @property
    def variance(self):
        return self._variance

    @property
    def covariance(self):
        return self._covariance

    @property
    def std(self):
        """Posterior standard deviation, sqrt(variance)."""
        if self._variance is None:
            return None
        return gnp.sqrt(gnp.maximum(self._variance, 0.0))

    def __iter__(self):
        return iter((self._mean, self._variance))

    def __repr__(self):
        return (
            f"<PosteriorResult m={self._mean.shape[0]} "
            f"variance={'yes' if self._variance is not None else 'no'} "
            f"covariance={'yes' if self._covariance is not None else 'no'}>"
        )


class Posterior:
    """GP conditioned on fixed data (x, y) and hyperparameters.

    Holds the Cholesky factorization of A = K(x, x) + σ² I and the
    weights alpha = A^{-1} y. Instances are built by :func:`condition`
    and their attributes are read-only; a change of data or
    hyperparameters means building a new one.
    """

    __slots__ = ("_x", "_y", "_hyperparams", "_solver", "_alpha")

    def __init__(self, x, y, hyperparams, solver, alpha):
        self._x = x
        self._y = y
        self._hyperparams = hyperparams
        self._solver = solver
        self._alpha = alpha

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def hyperparams(self):
        return self._hyperparams

    @property
    def solver(self):
        """CholeskySolver for K(x, x) + σ² I."""
        return self._solver

    @property
    def alpha(self):
        return self._alpha

    def __repr__(self):
        return (
            f"<gprbf.core.Posterior n={self.x.shape[0]} "
            f"kernel_width={self.hyperparams.kernel_width} "
            f"noise_variance={self.hyperparams.noise_variance}>"
        )

    def predict(self, z, return_type=0, zero_neg_variances=True, convert_in=True):
        """Posterior mean and variance at query points z.

        Parameters
        ----------
        z : array_like, shape (m,) or (m, 1)
            Query points.
        return_type : int, optional
            -1: mean only,
             0: mean and marginal variances (default),
             1: mean, marginal variances and full covariance.
        zero_neg_variances : bool, optional
            Replace negative variances (round-off) with zeros, by default True.
        convert_in : bool, optional
            Whether to validate and convert z, by default True.

        Returns
        -------
        PosteriorResult
        """
        if return_type not in (-1, 0, 1):
            raise ValueError("return_type must be in {-1, 0, 1}")
        if convert_in:
            _, _, z = utils.ensure_shapes_and_type(xt=z)
        width = self.hyperparams.kernel_width
        m = z.shape[0]

        if m == 0:
            empty = gnp.zeros((0,))
            return PosteriorResult(
                empty,
                None if return_type == -1 else empty,
                gnp.zeros((0, 0)) if return_type == 1 else None,
            )

        Kxz = rbf_covariance(self.x, z, width)
        zt_mean = gnp.einsum("i..., i...", Kxz, self.alpha)
        if return_type == -1:
            return PosteriorResult(zt_mean)

        V = self.solver.solve_lower(Kxz)
        zt_covariance = None
        if return_type == 0:
            zt_prior_variance = rbf_covariance(z, None, width, pairwise=True)
            zt_variance = zt_prior_variance - gnp.sum(V * V, axis=0)
        else:
            Kzz = rbf_covariance(z, None, width)
            zt_covariance = Kzz - gnp.matmul(V.T, V)
            zt_covariance = 0.5 * (zt_covariance + zt_covariance.T)
            zt_variance = gnp.diag(zt_covariance).copy()

        if gnp.any(zt_variance < 0.0):
            warnings.warn(
                "Negative variances detected. Consider increasing the noise variance.",
                RuntimeWarning,
            )
        if zero_neg_variances:
            zt_variance = gnp.maximum(zt_variance, 0.0)

        return PosteriorResult(zt_mean, zt_variance, zt_covariance)

    def log_marginal_likelihood(self):
        """log p(y | x, hyperparams) = -yᵀα/2 - log det A / 2 - n log(2π) / 2."""
        n = self.x.shape[0]
        data_fit = gnp.einsum("i, i", self.y, self.alpha)
        return float(
            -0.5 * data_fit - 0.5 * self.solver.logdet() - 0.5 * n * math.log(2.0 * math.pi)
        )


def _condition(x, y, hyperparams):
    """Factor A = K(x, x) + (σ² + jitter) I; inputs already validated."""
    jitter = get_config().jitter
    n = x.shape[0]
    _logger.debug(
        "Conditioning on n=%d points (kernel_width=%g, noise_variance=%g, jitter=%g)",
        n, hyperparams.kernel_width, hyperparams.noise_variance, jitter,
    )
    Kxx = rbf_covariance(x, None, hyperparams.kernel_width)
    A = Kxx + (hyperparams.noise_variance + jitter) * gnp.eye(n)
    solver = CholeskySolver(A)
    alpha = solver.solve(y)
    return Posterior(x, y, hyperparams, solver, alpha)


def condition(x, y, hyperparams):
    """Condition the GP on observations (x, y).

    Parameters
    ----------
    x : array_like, shape (n,) or (n, 1)
        Observation points.
    y : array_like, shape (n,) or (n, 1)
        Observed values.
    hyperparams : Hyperparameters, dict or (kernel_width, noise_variance)

    Returns
    -------
    Posterior

    Raises
    ------
    DimensionMismatch
        If x and y have different lengths or are not one-dimensional.
    InvalidHyperparameter
        If kernel_width <= 0 or noise_variance < 0.
    SingularMatrix
        If K(x, x) + σ² I is not numerically positive definite.
    """
    x, y, _ = utils.ensure_shapes_and_type(xi=x, zi=y)
    hyperparams = as_hyperparameters(hyperparams)
    return _condition(x, y, hyperparams)


def predict(x, y, z, hyperparams, return_type=0, zero_neg_variances=True):
    """Posterior mean and variance at z given noisy observations (x, y).

    All inputs are validated before any matrix is built, and either a
    complete result is returned or an exception is raised.

    Parameters
    ----------
    x : array_like, shape (n,) or (n, 1)
        Observation points.
    y : array_like, shape (n,) or (n, 1)
        Observed values.
    z : array_like, shape (m,) or (m, 1)
        Query points.
    hyperparams : Hyperparameters, dict or (kernel_width, noise_variance)
    return_type : int, optional
        -1: mean only, 0: marginal variances (default), 1: full covariance too.
    zero_neg_variances : bool, optional
        Whether to replace negative posterior variances with zeros, by default True.

    Returns
    -------
    PosteriorResult

    Raises
    ------
    DimensionMismatch, InvalidHyperparameter, SingularMatrix
    """
    if return_type not in (-1, 0, 1):
        raise ValueError("return_type must be in {-1, 0, 1}")
    x, y, z = utils.ensure_shapes_and_type(xi=x, zi=y, xt=z)
    hyperparams = as_hyperparameters(hyperparams)
    posterior = _condition(x, y, hyperparams)
    return posterior.predict(
        z, return_type=return_type, zero_neg_variances=zero_neg_variances, convert_in=False
    )
