# gprbf/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for gprbf.num."""

from gprbf.config import get_config


def get_dtype():
    return get_config().dtype_resolved


def float_info():
    """Return (eps, max) of the working float type."""
    import gprbf.num as gnp

    return gnp.eps, gnp.fmax
