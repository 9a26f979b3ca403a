# gprbf/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_SUPPORTED_BACKENDS = ("numpy",)


class _GPRBFConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype = "float64"
        self.dtype_resolved = None
        self.seed = 1234
        # constant added to the diagonal of K + noise_variance * I; opt-in only
        self.jitter = 0.0
        # relative threshold on the squared Cholesky pivots; None means n * eps
        self.pivot_rtol = None
        # logger lives in config
        self.logger = logging.getLogger("gprbf")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPRBFConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"jitter={self.jitter}, "
            f"pivot_rtol={self.pivot_rtol})"
        )

    def __repr__(self):
        return (
            f"<GPRBFConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"jitter={self.jitter!r}, "
            f"pivot_rtol={self.pivot_rtol!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration entry '{k}'")
            if k == "jitter":
                _check_jitter(v)
            elif k == "pivot_rtol":
                _check_pivot_rtol(v)
            setattr(self, k, v)
        return self


_config = _GPRBFConfig()


def _check_jitter(jitter):
    if not jitter >= 0.0:
        raise ValueError("jitter must be a non-negative float")


def _check_pivot_rtol(rtol):
    if rtol is not None and not rtol >= 0.0:
        raise ValueError("pivot_rtol must be None or a non-negative float")


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("GPRBF_BACKEND")
    if env is None:
        return "numpy"
    if env not in _SUPPORTED_BACKENDS:
        raise RuntimeError(
            f"GPRBF_BACKEND={env!r} is not supported; use one of {_SUPPORTED_BACKENDS}."
        )
    return env


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["GPRBF_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend before importing gprbf.num."""
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError(f"backend must be one of {_SUPPORTED_BACKENDS}")
    _config.backend = backend
    os.environ["GPRBF_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def set_seed(seed: int):
    """Reseed the random generator used by gprbf.misc data sources."""
    _config.seed = seed
    # deferred import: gprbf.num reads the config at import time
    import gprbf.num as gnp

    gnp.set_seed(seed)


def set_jitter(jitter: float):
    """Opt in to a constant diagonal jitter on the regularized matrix."""
    _check_jitter(jitter)
    _config.jitter = float(jitter)


def set_pivot_rtol(rtol):
    _check_pivot_rtol(rtol)
    _config.pivot_rtol = rtol


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
