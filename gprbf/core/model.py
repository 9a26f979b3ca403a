# gprbf/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
from gprbf.kernel import rbf_covariance
from .hyperparams import Hyperparameters, as_hyperparameters
from . import posterior


class Model:
    """Zero-mean Gaussian Process model with an RBF kernel on the real line.

    The model only holds its hyperparameters. Every call to
    :meth:`predict` recomputes everything from the data it is given,
    so a model can be shared between callers and its hyperparameters
    changed between calls.

    Attributes
    ----------
    hyperparams : Hyperparameters
        Kernel width and noise variance. Assigning a new value (a
        Hyperparameters, a dict, or a pair) validates it.

    Public API (methods)
    --------------------
    predict
        Posterior mean/variance at query points.
    condition
        Factor the regularized covariance once for fixed data.
    covariance
        RBF covariance matrix for the current kernel width.

    Examples
    --------
    >>> import gprbf as gp
    >>> model = gp.Model(kernel_width=2.0, noise_variance=1e-4)
    >>> zpm, zpv = model.predict([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], [0.5, 1.5])
    """

    def __init__(self, kernel_width=2.0, noise_variance=0.0):
        self.hyperparams = Hyperparameters.create(kernel_width, noise_variance)

    @property
    def hyperparams(self):
        return self._hyperparams

    @hyperparams.setter
    def hyperparams(self, value):
        self._hyperparams = as_hyperparameters(value)

    @property
    def kernel_width(self):
        return self._hyperparams.kernel_width

    @kernel_width.setter
    def kernel_width(self, value):
        self._hyperparams = self._hyperparams.replace(kernel_width=value)

    @property
    def noise_variance(self):
        return self._hyperparams.noise_variance

    @noise_variance.setter
    def noise_variance(self, value):
        self._hyperparams = self._hyperparams.replace(noise_variance=value)

    def __repr__(self):
        output = str("<gprbf.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Mean Type: zero\n"
            f"  Covariance Function: rbf\n"
            f"  Kernel Width: {self.kernel_width}\n"
            f"  Noise Variance: {self.noise_variance}"
        )

    def covariance(self, x, y=None, pairwise=False):
        """RBF covariance between x and y (y=None means y := x)."""
        return rbf_covariance(x, y, self.kernel_width, pairwise)

    def condition(self, xi, zi):
        """Condition the model on observations (xi, zi).

        Returns
        -------
        Posterior
            Holds the factorization for the current hyperparameters;
            later changes to the model do not affect it.
        """
        return posterior.condition(xi, zi, self._hyperparams)

    def predict(self, xi, zi, xt, return_type=0, zero_neg_variances=True):
        """Performs a prediction at target points xt given the data (xi, zi).

        Parameters
        ----------
        xi : array_like, shape (ni,) or (ni, 1)
            Observation points.
        zi : array_like, shape (ni,) or (ni, 1)
            Observed values at the observation points.
        xt : array_like, shape (nt,) or (nt, 1)
            Target points where predictions are to be made.
        return_type : int, optional
            -1: mean only, 0: marginal variances (default), 1: full covariance too.
        zero_neg_variances : bool, optional
            Whether to replace negative posterior variances with zeros, by default True.
            Negative variances can occur due to numerical errors.

        Returns
        -------
        PosteriorResult
            Unpacks as ``(zt_posterior_mean, zt_posterior_variance)``.
        """
        return posterior.predict(
            xi,
            zi,
            xt,
            self._hyperparams,
            return_type=return_type,
            zero_neg_variances=zero_neg_variances,
        )
