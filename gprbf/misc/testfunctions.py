# coding: utf-8
## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import numpy as np
import gprbf.num as gnp


def radio_signal(x):
    """
    Computes the RadioSignal function at X.

    A wave composed of two tones plus a slowly decaying offset:

       RadioSignal(x) = sin(2x) + sin(3x) + 1 / (1 + x)

    defined for x > -1, usually studied on [0, 2π].

    Parameters
    ----------
    x : numpy.ndarray
        Input array of shape (n,) or (n, 1)

    Returns
    -------
    numpy.ndarray
        Output array of shape (n,)
    """
    x = np.asarray(x, dtype=float).reshape(-1)
    z = np.sin(2 * x) + np.sin(3 * x) + 1.0 / (1.0 + x)
    return z


def noisy_observations(f, x, noise_std=0.2):
    """
    Evaluate f at x and add independent Gaussian noise.

    Parameters
    ----------
    f : callable
        Test function, returning an array of shape (n,).
    x : numpy.ndarray
        Observation points, shape (n,)
    noise_std : float, optional
        Standard deviation of the noise, default is 0.2.

    Returns
    -------
    numpy.ndarray
        Noisy observations, shape (n,)
    """
    if noise_std < 0:
        raise ValueError("noise_std must be non-negative")
    z = np.asarray(f(x), dtype=float).reshape(-1)
    return z + noise_std * gnp.randn(z.shape[0])
