# gprbf/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gprbf.

All of them derive from :class:`GPRBFError`, and also from the builtin
(or NumPy) exception a caller would naturally catch for the same
failure, so ``except ValueError`` or ``except numpy.linalg.LinAlgError``
keep working.
"""
from numpy.linalg import LinAlgError


class GPRBFError(Exception):
    """Base class of gprbf errors."""


class DimensionMismatch(GPRBFError, ValueError):
    """Inputs with incompatible lengths or shapes.

    Raised when the training inputs and targets have different lengths,
    or when an input is not one-dimensional.
    """


class InvalidHyperparameter(GPRBFError, ValueError):
    """Non-positive kernel width, negative noise variance, or a non-finite value."""


class SingularMatrix(GPRBFError, LinAlgError):
    """The regularized covariance matrix is not numerically positive definite."""
