import math

import pytest

import gprbf.num as gnp
from gprbf.kernel import rbf_kernel, rbf_covariance
from gprbf.errors import InvalidHyperparameter, DimensionMismatch


def test_rbf_kernel_values():
    assert rbf_kernel(1.3, 1.3, 0.5) == 1.0
    assert rbf_kernel(0.0, 1.0, 2.0) == pytest.approx(math.exp(-0.5))
    assert rbf_kernel(0.0, 2.0, 2.0) == pytest.approx(math.exp(-2.0))


def test_rbf_kernel_symmetric_and_decreasing():
    values = [rbf_kernel(0.0, d, 1.5) for d in (0.0, 0.1, 0.5, 1.0, 3.0)]
    assert all(v1 > v2 for v1, v2 in zip(values, values[1:]))
    assert all(0.0 < v <= 1.0 for v in values)
    assert rbf_kernel(-0.7, 2.1, 1.5) == rbf_kernel(2.1, -0.7, 1.5)


def test_rbf_kernel_elementwise():
    a = gnp.asarray([0.0, 1.0, 2.0])
    b = gnp.asarray([0.0, 0.0, 0.0])
    k = rbf_kernel(a, b, 2.0)
    assert k.shape == (3,)
    assert gnp.allclose(k, gnp.exp(-(a ** 2) / 2.0))


@pytest.mark.parametrize("width", [0.0, -1.0, float("nan"), float("inf"), "abc", None])
def test_rbf_kernel_invalid_width(width):
    with pytest.raises(InvalidHyperparameter):
        rbf_kernel(0.0, 1.0, width)
    with pytest.raises(InvalidHyperparameter):
        rbf_covariance([0.0, 1.0], None, width)


def test_covariance_symmetric_path_is_exact():
    x = gnp.rand(40) * 2.0 * gnp.pi
    K = rbf_covariance(x, x, 0.8)
    assert K.shape == (40, 40)
    assert (K == K.T).all()
    assert (gnp.diag(K) == 1.0).all()


def test_covariance_matches_kernel():
    x = gnp.asarray([0.0, 0.5, 2.0, 2.0])
    y = gnp.asarray([1.0, -1.0])
    K = rbf_covariance(x, y, 1.7)
    assert K.shape == (4, 2)
    for i in range(4):
        for j in range(2):
            assert K[i, j] == pytest.approx(rbf_kernel(float(x[i]), float(y[j]), 1.7), rel=1e-14)
    Ks = rbf_covariance(x, None, 1.7)
    for i in range(4):
        for j in range(4):
            assert Ks[i, j] == pytest.approx(rbf_kernel(float(x[i]), float(x[j]), 1.7), rel=1e-14)


def test_covariance_is_positive_semidefinite():
    x = gnp.rand(60) * 2.0 * gnp.pi
    for width in (0.01, 0.5, 2.0, 100.0):
        K = rbf_covariance(x, None, width)
        eigenvalues = gnp.eigvalsh(K)
        assert gnp.min(eigenvalues) >= -1e-10 * x.shape[0]


def test_covariance_pairwise():
    x = gnp.asarray([0.0, 1.0, 2.0])
    y = gnp.asarray([0.0, 0.0, 1.0])
    assert gnp.allclose(rbf_covariance(x, None, 2.0, pairwise=True), gnp.ones(3))
    k = rbf_covariance(x, y, 2.0, pairwise=True)
    assert gnp.allclose(k, gnp.asarray([1.0, math.exp(-0.5), math.exp(-0.5)]))
    with pytest.raises(DimensionMismatch):
        rbf_covariance(x, gnp.asarray([0.0, 1.0]), 2.0, pairwise=True)


def test_covariance_column_inputs_and_empty():
    x = gnp.asarray([[0.0], [1.0]])
    assert rbf_covariance(x, None, 1.0).shape == (2, 2)
    assert rbf_covariance(gnp.zeros((0,)), None, 1.0).shape == (0, 0)
    assert rbf_covariance(gnp.zeros((0,)), gnp.ones(3), 1.0).shape == (0, 3)
    with pytest.raises(DimensionMismatch):
        rbf_covariance(gnp.ones((2, 2)), None, 1.0)
