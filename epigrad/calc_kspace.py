from typing import Union

import numpy as np

from epigrad.opts import Opts


def calc_kspace(g: np.ndarray, raster_time: Union[float, None] = None) -> np.ndarray:
    """
    Integrate gradient waveform `g` into its k-space trajectory.

    The trajectory is the running zeroth moment at the end of each sample, in the units the trapezoid areas were
    requested in (G/cm*ms for waveforms from `make_trap_waveform`). For `make_epi` output this is the trajectory the
    `kxm` and `kym` extents describe.

    Parameters
    ----------
    g : numpy.ndarray
        Gradient waveform, of shape [points] or [points, channels].
    raster_time : float, default=Opts().grad_raster_time
        Sample interval (ms).

    Returns
    -------
    k : numpy.ndarray
        K-space trajectory, same shape as `g`.
    """
    if raster_time is None:
        raster_time = Opts.default.grad_raster_time

    return np.cumsum(g, axis=0) * raster_time
