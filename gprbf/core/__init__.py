# gprbf/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gprbf package.

This subpackage contains the numerical routines for Gaussian Process
regression: hyperparameter validation, the Cholesky solver, and the
posterior predictive distribution.

Public API
----------
Model : class
    Gaussian Process model façade.
Hyperparameters : class
    Validated (kernel_width, noise_variance) pair.
predict, condition : functions
    Posterior predictive distribution.
PosteriorResult, Posterior : classes
    Prediction outputs and conditioned model.
CholeskySolver : class
    Factor-once, solve-many SPD solver.
"""

from .hyperparams import Hyperparameters, as_hyperparameters
from .linalg import CholeskySolver, cholesky_solve
from .posterior import PosteriorResult, Posterior, predict, condition
from .model import Model

__all__ = [
    "Model",
    "Hyperparameters",
    "as_hyperparameters",
    "CholeskySolver",
    "cholesky_solve",
    "PosteriorResult",
    "Posterior",
    "predict",
    "condition",
]
