from typing import Union

import numpy as np

from epigrad.opts import Opts

# Relative tolerance on the limits, for round-off in sampled ramps
_tolerance = 1e-9


def check_gradient(
    g: np.ndarray,
    max_grad: Union[float, None] = None,
    max_slew: Union[float, None] = None,
    raster_time: Union[float, None] = None,
    system: Union[Opts, None] = None,
) -> None:
    """
    Check a sampled gradient waveform against the amplitude and slew rate limits.

    The waveform is assumed to start from and return to zero, so the steps before the first and after the last
    sample count towards the slew rate.

    Parameters
    ----------
    g : numpy.ndarray
        Gradient waveform (G/cm), either of shape [points] or [points, channels].
    max_grad : float, default=None
        Maximum gradient amplitude (G/cm). Will default to `system.max_grad` if not provided.
    max_slew : float, default=None
        Maximum slew rate (G/cm/ms). Will default to `system.max_slew` if not provided.
    raster_time : float, default=None
        Sample interval (ms). Will default to `system.grad_raster_time` if not provided.
    system : Opts, default=Opts()
        System limits.

    Raises
    ------
    ValueError
        If gradient amplitude is violated.
        If slew rate is violated.
    """
    if system is None:
        system = Opts.default

    if max_grad is None:
        max_grad = system.max_grad

    if max_slew is None:
        max_slew = system.max_slew

    if raster_time is None:
        raster_time = system.grad_raster_time

    g = np.asarray(g, dtype=float)
    if g.ndim == 1:
        g = g[:, np.newaxis]
    if g.shape[0] == 0:
        return

    zero = np.zeros((1, g.shape[1]))
    slew_rate = np.diff(np.concatenate((zero, g, zero)), axis=0) / raster_time

    max_abs_grad = np.max(np.abs(g))
    if max_abs_grad > max_grad * (1 + _tolerance):
        raise ValueError(f'Gradient amplitude violation {max_abs_grad / max_grad * 100:.1f}%')

    max_abs_slew = np.max(np.abs(slew_rate))
    if max_abs_slew > max_slew * (1 + _tolerance):
        raise ValueError(f'Slew rate violation {max_abs_slew / max_slew * 100:.1f}%')
