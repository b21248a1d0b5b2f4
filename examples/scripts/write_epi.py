"""
Demo single-shot EPI gradient waveform without ramp-sampling.
"""

from typing import Tuple, Union

import numpy as np

import epigrad as eg


def main(
    plot: bool = False,
    check: bool = True,
    *,
    fov: Union[float, Tuple[float, float]] = 22,
    n_x: int = 64,
    n_y: int = 64,
):
    """Create a single-shot EPI gradient waveform pair.

    Parameters
    ----------
    plot : bool, optional
        Plot the gradients and the k-space trajectory. Default is False.
    check : bool, optional
        Check the waveform against the system limits and print a short timing report. Default is True.
    fov : float or tuple of float, optional
        Field of view in cm. If a single value, it is used for both x and y.
        If a tuple, it is (fov_x, fov_y). Default is 22.
    n_x : int, optional
        Number of readout samples. Default is 64.
    n_y : int, optional
        Number of phase encoding lines. Default is 64.

    Returns
    -------
    g : numpy.ndarray
        EPI gradients of shape [points, 2] (G/cm).
    info : SimpleNamespace
        Index information of the EPI gradients.
    """
    fov_x, fov_y = (fov, fov) if isinstance(fov, (int, float)) else fov

    # Set system limits
    system = eg.Opts(
        max_grad=32,
        grad_unit='mT/m',
        max_slew=130,
        slew_unit='T/m/s',
    )

    # Extents of k-space, +/- half the sampled width
    kxm = n_x / fov_x / 2
    kym = n_y / fov_y / 2

    g, info = eg.make_epi(kxm=kxm, kym=kym, nl=n_y, system=system)

    if check:
        eg.check_gradient(g, system=system)
        echo_spacing = (info.ltrap + info.lblip) * system.grad_raster_time
        print('Limit check passed successfully')
        print(f'Echo spacing: {echo_spacing:.3f} ms')
        print(f'Readout duration: {g.shape[0] * system.grad_raster_time:.3f} ms')
        print(f'Peak readout gradient: {np.max(np.abs(g[:, 0])):.3f} G/cm')

    if plot:
        eg.plot_epi(g, info, raster_time=system.grad_raster_time)

    return g, info


if __name__ == '__main__':
    main(plot=True)
