# gprbf/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process kernels.

Modules
-------
rbf
    RBF kernel on the real line and its covariance matrices.

Public API
-----------
rbf_kernel, rbf_covariance, check_kernel_width
"""

from .rbf import rbf_kernel, rbf_covariance, check_kernel_width

__all__ = [
    "rbf_kernel",
    "rbf_covariance",
    "check_kernel_width",
]
