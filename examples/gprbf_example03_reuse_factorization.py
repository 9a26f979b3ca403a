"""
Condition once on the data, then predict on several query sets

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2024, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gprbf.num as gnp
import gprbf as gp


def main():
    xi = gp.misc.designs.randunif(1000)
    zi = gp.misc.testfunctions.noisy_observations(
        gp.misc.testfunctions.radio_signal, xi
    )

    model = gp.Model(kernel_width=0.5, noise_variance=0.04)
    posterior = model.condition(xi, zi)
    print(posterior)

    for nt in (5, 100, 1000):
        xt = gp.misc.designs.regulargrid(nt)
        result = posterior.predict(xt, return_type=1)
        zt = gp.misc.testfunctions.radio_signal(xt)
        err = gnp.max(gnp.abs(result.mean - zt))
        print(f'nt={nt:5d}  max abs error={err:.4f}  max std={gnp.max(result.std):.4f}')

    return posterior


if __name__ == '__main__':
    main()
