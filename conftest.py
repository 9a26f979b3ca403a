# Root conftest. pytest inserts this directory into sys.path when it
# loads the file, which makes the scripts under examples/ importable
# from tests/test_examples.py. The fixture below resets the gprbf
# configuration before every test.
import pytest

import gprbf


@pytest.fixture(autouse=True)
def _reset_config():
    gprbf.config.set_seed(1234)
    gprbf.config.set_jitter(0.0)
    gprbf.config.set_pivot_rtol(None)
    yield
    gprbf.config.set_jitter(0.0)
    gprbf.config.set_pivot_rtol(None)
