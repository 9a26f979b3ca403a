# gprbf/misc/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Miscellaneous utility modules for gprbf: test data and hyperparameter sweeps.
"""

from . import designs
from . import testfunctions
from . import sweep
