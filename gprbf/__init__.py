# gprbf/__init__.py

from . import config
from . import errors
from . import num
from . import kernel
from . import core
from . import misc
from .core import Model, Hyperparameters, PosteriorResult, predict, condition
from .errors import GPRBFError, DimensionMismatch, InvalidHyperparameter, SingularMatrix

__all__ = [
    "num",
    "kernel",
    "core",
    "misc",
    "Model",
    "Hyperparameters",
    "PosteriorResult",
    "predict",
    "condition",
    "GPRBFError",
    "DimensionMismatch",
    "InvalidHyperparameter",
    "SingularMatrix",
    "__version__",
]

__version__ = config.__version__
