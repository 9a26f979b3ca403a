import math

import numpy as np
import pytest
from scipy.stats import multivariate_normal

import gprbf as gp
import gprbf.num as gnp
import gprbf.core.posterior as posterior_module
from gprbf.core import predict, condition, Hyperparameters, PosteriorResult
from gprbf.errors import DimensionMismatch, InvalidHyperparameter, SingularMatrix


def _radio_data(n=30, noise_std=0.2):
    xi = gp.misc.designs.randunif(n)
    zi = gp.misc.testfunctions.noisy_observations(
        gp.misc.testfunctions.radio_signal, xi, noise_std=noise_std
    )
    return xi, zi


def _naive_posterior(x, y, z, width, noise_variance):
    """Textbook formulas with explicit inverses."""
    Kxx = gp.kernel.rbf_covariance(x, None, width)
    Kzx = gp.kernel.rbf_covariance(z, x, width)
    Kzz = gp.kernel.rbf_covariance(z, None, width)
    Ainv = np.linalg.inv(Kxx + noise_variance * np.eye(x.shape[0]))
    return Kzx @ Ainv @ y, Kzz - Kzx @ Ainv @ Kzx.T


def test_small_noise_interpolates_training_targets():
    x = [0.0, 1.0, 2.0]
    y = [0.0, 1.0, 0.0]
    result = predict(x, y, x, Hyperparameters.create(2.0, 0.0001))
    assert isinstance(result, PosteriorResult)
    assert np.allclose(result.mean, y, atol=1e-3)


def test_wide_kernel_gives_constant_mean():
    x = [0.0, 1.0, 2.0]
    y = [0.0, 1.0, 0.0]
    z = gnp.linspace(-1.0, 3.0, 9)
    result = predict(x, y, z, (1000.0, 0.01))
    K = gp.kernel.rbf_covariance(gnp.asarray(x), None, 1000.0)
    assert gnp.min(K) > 0.99
    assert np.allclose(result.mean, np.mean(y), atol=1e-2)
    assert gnp.max(result.mean) - gnp.min(result.mean) < 1e-2


def test_duplicate_inputs_without_noise_are_singular():
    with pytest.raises(SingularMatrix):
        predict([0.0, 0.0, 1.0], [0.0, 1.0, 0.0], [0.5], (2.0, 0.0))


def test_duplicate_inputs_with_opt_in_jitter():
    gp.config.set_jitter(1e-6)
    result = predict([0.0, 0.0, 1.0], [0.0, 1.0, 0.0], [0.5], (2.0, 0.0))
    assert result.mean.shape == (1,)
    assert gnp.all(gnp.isfinite(result.mean))


def test_length_mismatch_raised_before_any_matrix(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("no matrix should be built")

    monkeypatch.setattr(posterior_module, "rbf_covariance", fail)
    with pytest.raises(DimensionMismatch):
        predict([0.0, 1.0, 2.0], [0.0, 1.0], [0.5], (2.0, 0.1))


@pytest.mark.parametrize(
    "hyperparams",
    [(0.0, 0.1), (-2.0, 0.1), (2.0, -0.1), (float("nan"), 0.1), (2.0, float("inf"))],
)
def test_invalid_hyperparameters_before_any_matrix(monkeypatch, hyperparams):
    def fail(*args, **kwargs):
        raise AssertionError("no matrix should be built")

    monkeypatch.setattr(posterior_module, "rbf_covariance", fail)
    with pytest.raises(InvalidHyperparameter):
        predict([0.0, 1.0], [0.0, 1.0], [0.5], hyperparams)


def test_hyperparameters_as_mapping():
    result = predict([0.0, 1.0], [0.0, 1.0], [0.5], {"kernel_width": 2.0, "noise_variance": 0.1})
    assert result.mean.shape == (1,)
    with pytest.raises(InvalidHyperparameter):
        predict([0.0, 1.0], [0.0, 1.0], [0.5], {"kernel_width": 2.0})
    with pytest.raises(InvalidHyperparameter):
        predict([0.0, 1.0], [0.0, 1.0], [0.5], 2.0)


def test_interpolation_as_noise_vanishes():
    x = gnp.linspace(0.0, 2.0 * math.pi, 8)
    y = gp.misc.testfunctions.radio_signal(x)
    result = predict(x, y, x, (2.0, 1e-10))
    assert np.allclose(result.mean, y, atol=1e-6)
    assert gnp.max(result.variance) < 1e-6


def test_matches_explicit_inverse_formulas():
    xi, zi = _radio_data(25)
    xt = gp.misc.designs.regulargrid(17)
    result = predict(xi, zi, xt, (0.7, 0.05), return_type=1)
    mean, cov = _naive_posterior(xi, zi, xt, 0.7, 0.05)
    assert np.allclose(result.mean, mean, atol=1e-8)
    assert np.allclose(result.covariance, cov, atol=1e-8)
    assert np.allclose(result.variance, np.diag(cov), atol=1e-8)


def test_full_covariance_consistent_with_variances():
    xi, zi = _radio_data(20)
    xt = gp.misc.designs.regulargrid(11)
    marginal = predict(xi, zi, xt, (1.0, 0.04))
    full = predict(xi, zi, xt, (1.0, 0.04), return_type=1)
    assert marginal.covariance is None
    assert full.covariance.shape == (11, 11)
    assert (full.covariance == full.covariance.T).all()
    assert np.allclose(full.variance, marginal.variance, atol=1e-10)
    assert np.allclose(full.mean, marginal.mean)


def test_mean_only():
    xi, zi = _radio_data(10)
    result = predict(xi, zi, [1.0, 2.0], (1.0, 0.04), return_type=-1)
    assert result.variance is None
    assert result.std is None
    assert result.mean.shape == (2,)
    with pytest.raises(ValueError):
        predict(xi, zi, [1.0], (1.0, 0.04), return_type=2)


@pytest.mark.parametrize("width,noise_variance", [(0.05, 0.0), (0.5, 1e-8), (2.0, 0.1), (3.0, 1.0)])
def test_variances_are_nonnegative(width, noise_variance):
    xi = gnp.linspace(0.0, 2.0 * math.pi, 15)
    zi = gp.misc.testfunctions.radio_signal(xi)
    xt = gp.misc.designs.randunif(50)
    raw = predict(xi, zi, xt, (width, noise_variance), zero_neg_variances=False)
    assert gnp.min(raw.variance) >= -1e-8
    clamped = predict(xi, zi, xt, (width, noise_variance))
    assert gnp.min(clamped.variance) >= 0.0
    assert (clamped.variance <= 1.0 + 1e-12).all()


def test_result_unpacking_and_std():
    xi, zi = _radio_data(12)
    result = predict(xi, zi, [0.3, 1.2, 2.5, 4.0, 5.1], (1.0, 0.04))
    zpm, zpv = result
    assert zpm is result.mean
    assert zpv is result.variance
    assert len(tuple(result)) == 2
    assert result.mean.shape == (5,)
    with pytest.raises(AttributeError):
        result.mean = gnp.zeros(5)
    assert np.allclose(result.std ** 2, result.variance)
    assert "PosteriorResult" in repr(result)


def test_no_observations_gives_prior():
    result = predict([], [], [0.0, 1.0, 2.0], (2.0, 0.1), return_type=1)
    assert np.allclose(result.mean, 0.0)
    assert np.allclose(result.variance, 1.0)
    assert np.allclose(result.covariance, gp.kernel.rbf_covariance(gnp.asarray([0.0, 1.0, 2.0]), None, 2.0))


def test_no_query_points():
    result = predict([0.0, 1.0], [1.0, 2.0], [], (2.0, 0.1), return_type=1)
    assert result.mean.shape == (0,)
    assert result.variance.shape == (0,)
    assert result.covariance.shape == (0, 0)


def test_input_validation():
    with pytest.raises(DimensionMismatch):
        predict(gnp.ones((3, 2)), gnp.ones(3), [0.0], (1.0, 0.1))
    with pytest.raises(ValueError):
        predict([0.0, float("nan")], [0.0, 1.0], [0.0], (1.0, 0.1))
    result = predict(gnp.asarray([[0.0], [1.0]]), gnp.asarray([[0.0], [1.0]]), [[0.5]], (1.0, 0.1))
    assert result.mean.shape == (1,)


def test_condition_reuses_factorization():
    xi, zi = _radio_data(40)
    posterior = condition(xi, zi, (0.5, 0.04))
    for nt in (3, 50):
        xt = gp.misc.designs.regulargrid(nt)
        reused = posterior.predict(xt)
        direct = predict(xi, zi, xt, (0.5, 0.04))
        assert np.allclose(reused.mean, direct.mean)
        assert np.allclose(reused.variance, direct.variance)
    assert "Posterior" in repr(posterior)
    with pytest.raises(AttributeError):
        posterior.alpha = gnp.zeros(40)
    with pytest.raises(AttributeError):
        posterior.hyperparams = (1.0, 0.04)


def test_log_marginal_likelihood():
    xi, zi = _radio_data(15)
    posterior = condition(xi, zi, (1.0, 0.04))
    A = gp.kernel.rbf_covariance(xi, None, 1.0) + 0.04 * np.eye(15)
    expected = multivariate_normal.logpdf(zi, mean=np.zeros(15), cov=A)
    assert posterior.log_marginal_likelihood() == pytest.approx(expected, rel=1e-8)


def test_deterministic():
    xi, zi = _radio_data(30)
    xt = gp.misc.designs.regulargrid(20)
    r1 = predict(xi, zi, xt, (0.8, 0.1))
    r2 = predict(xi, zi, xt, (0.8, 0.1))
    assert (r1.mean == r2.mean).all()
    assert (r1.variance == r2.variance).all()
