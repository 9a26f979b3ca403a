"""
Compare posterior fits over a grid of kernel widths and noise variances

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2024, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gprbf.num as gnp
import gprbf as gp


def main():
    xt = gp.misc.designs.regulargrid(100)
    zt = gp.misc.testfunctions.radio_signal(xt)
    xi = gp.misc.designs.randunif(64)
    zi = gp.misc.testfunctions.noisy_observations(
        gp.misc.testfunctions.radio_signal, xi
    )

    kernel_widths = [0.1, 0.5, 1.0, 2.0, 3.0]
    noise_variances = [0.0, 0.01, 0.1, 0.5, 1.0]
    results = gp.misc.sweep.hyperparameter_sweep(
        xi, zi, xt, kernel_widths, noise_variances, skip_singular=True
    )

    print(f"{'kernel_width':>12s} {'noise_var':>10s} {'rmse':>8s} {'log-lik':>10s}")
    best = None
    for hp, result in results:
        if result is None:
            print(f'{hp.kernel_width:12.3f} {hp.noise_variance:10.3f} {"singular":>8s}')
            continue
        rmse = gnp.sqrt(gnp.mean((result.mean - zt) ** 2))
        loglik = gp.condition(xi, zi, hp).log_marginal_likelihood()
        print(f'{hp.kernel_width:12.3f} {hp.noise_variance:10.3f} {rmse:8.4f} {loglik:10.2f}')
        if best is None or rmse < best[1]:
            best = (hp, rmse)

    print(f'\nBest fit: {best[0]} (RMSE {best[1]:.4f})')
    return best


if __name__ == '__main__':
    main()
