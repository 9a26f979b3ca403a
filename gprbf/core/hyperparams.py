# gprbf/core/hyperparams.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Hyperparameters of the RBF GP model.
"""
import math
from typing import NamedTuple

from gprbf.errors import InvalidHyperparameter
from gprbf.kernel import check_kernel_width


def check_noise_variance(noise_variance):
    """Return `noise_variance` as a float, or raise InvalidHyperparameter."""
    try:
        s2 = float(noise_variance)
    except (TypeError, ValueError) as exc:
        raise InvalidHyperparameter(
            f"noise_variance must be a real number, got {noise_variance!r}"
        ) from exc
    if not math.isfinite(s2) or s2 < 0.0:
        raise InvalidHyperparameter(f"noise_variance must be finite and >= 0, got {s2}")
    return s2


class _HyperparametersBase(NamedTuple):
    kernel_width: float
    noise_variance: float


class Hyperparameters(_HyperparametersBase):
    """Kernel width and noise variance.

    Both values are validated at construction, so every instance
    satisfies ``kernel_width > 0`` and ``noise_variance >= 0``.

    Raises
    ------
    InvalidHyperparameter
        If kernel_width is not a finite number > 0, or noise_variance
        is not a finite number >= 0.
    """

    __slots__ = ()

    def __new__(cls, kernel_width=2.0, noise_variance=0.0):
        return super().__new__(
            cls, check_kernel_width(kernel_width), check_noise_variance(noise_variance)
        )

    @classmethod
    def create(cls, kernel_width=2.0, noise_variance=0.0):
        return cls(kernel_width, noise_variance)

    def replace(self, **kwargs):
        """Return a validated copy with some fields replaced."""
        return Hyperparameters(**{**self._asdict(), **kwargs})


def as_hyperparameters(hyperparams):
    """Convert to a validated Hyperparameters.

    Accepts a Hyperparameters, a mapping with keys ``kernel_width`` and
    ``noise_variance``, or a ``(kernel_width, noise_variance)`` pair.
    Values are always re-validated.
    """
    if isinstance(hyperparams, dict):
        try:
            return Hyperparameters.create(
                hyperparams["kernel_width"], hyperparams["noise_variance"]
            )
        except KeyError as exc:
            raise InvalidHyperparameter(f"missing hyperparameter {exc}") from exc
    try:
        kernel_width, noise_variance = hyperparams
    except (TypeError, ValueError) as exc:
        raise InvalidHyperparameter(
            "hyperparameters must be a (kernel_width, noise_variance) pair"
        ) from exc
    return Hyperparameters.create(kernel_width, noise_variance)
