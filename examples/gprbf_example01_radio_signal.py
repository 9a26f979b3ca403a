"""
Denoise a radio signal with GP regression (RBF kernel, fixed hyperparameters)

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2024, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gprbf.num as gnp
import gprbf as gp


def generate_data(ni=200):
    """
    Data generation.

    Returns
    -------
    tuple
        (xt, zt): target data
        (xi, zi): noisy observations
    """
    nt = 100
    xt = gp.misc.designs.regulargrid(nt)
    zt = gp.misc.testfunctions.radio_signal(xt)

    xi = gp.misc.designs.randunif(ni)
    zi = gp.misc.testfunctions.noisy_observations(
        gp.misc.testfunctions.radio_signal, xi, noise_std=0.2
    )
    return xt, zt, xi, zi


def main():
    xt, zt, xi, zi = generate_data()

    model = gp.Model(kernel_width=2.0, noise_variance=0.2)
    print(model)

    # Prediction
    zpm, zpv = model.predict(xi, zi, xt)

    rmse = gnp.sqrt(gnp.mean((zpm - zt) ** 2))
    coverage = gnp.mean(gnp.abs(zpm - zt) <= 2.0 * gnp.sqrt(zpv))
    print('\nPrediction')
    print('----------')
    print(f'observations: {xi.shape[0]}, targets: {xt.shape[0]}')
    print(f'RMSE against the true signal: {rmse:.4f}')
    print(f'share of targets within two posterior std: {coverage:.2f}')
    return rmse


if __name__ == '__main__':
    main()
