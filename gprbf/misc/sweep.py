# gprbf/misc/sweep.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Evaluation of the posterior over a grid of hyperparameters.

Each grid point is an independent call to `gprbf.core.predict`, so the
results do not depend on the order of evaluation.
"""
import itertools

from gprbf.config import get_logger
from gprbf.core import Hyperparameters, predict
from gprbf.core import utils
from gprbf.errors import SingularMatrix

_logger = get_logger()


def hyperparameter_grid(kernel_widths, noise_variances):
    """List of validated Hyperparameters, kernel width varying slowest."""
    return [
        Hyperparameters.create(w, s2)
        for w, s2 in itertools.product(kernel_widths, noise_variances)
    ]


def hyperparameter_sweep(
    x, y, z, kernel_widths, noise_variances, return_type=0, skip_singular=False
):
    """Posterior at z for every (kernel_width, noise_variance) pair.

    Parameters
    ----------
    x, y : array_like, shape (n,)
        Observations.
    z : array_like, shape (m,)
        Query points.
    kernel_widths : iterable of float
    noise_variances : iterable of float
    return_type : int, optional
        Passed to `predict`.
    skip_singular : bool, optional
        If True, a grid point whose regularized matrix is singular is
        reported with a None result instead of raising.

    Returns
    -------
    list of (Hyperparameters, PosteriorResult or None)

    Raises
    ------
    InvalidHyperparameter
        If any grid value is invalid (checked before any prediction).
    """
    grid = hyperparameter_grid(kernel_widths, noise_variances)
    x, y, z = utils.ensure_shapes_and_type(xi=x, zi=y, xt=z)
    results = []
    for hp in grid:
        try:
            result = predict(x, y, z, hp, return_type=return_type)
        except SingularMatrix as exc:
            if not skip_singular:
                raise
            _logger.warning(
                "Skipping kernel_width=%g, noise_variance=%g: %s",
                hp.kernel_width, hp.noise_variance, exc,
            )
            result = None
        results.append((hp, result))
    return results
