import unittest
from examples import (
    gprbf_example01_radio_signal,
    gprbf_example02_hyperparameter_sweep,
    gprbf_example03_reuse_factorization,
    )


class TestExamples(unittest.TestCase):
    def test_01(self):
        rmse = gprbf_example01_radio_signal.main()
        self.assertLess(rmse, 0.5)

    def test_02(self):
        best = gprbf_example02_hyperparameter_sweep.main()
        self.assertIsNotNone(best)

    def test_03(self):
        gprbf_example03_reuse_factorization.main()


if __name__ == "__main__":
    unittest.main()
