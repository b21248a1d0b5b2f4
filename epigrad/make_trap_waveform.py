import math
from typing import Union

import numpy as np

from epigrad.opts import Opts


def make_trap_waveform(
    area: float,
    max_grad: Union[float, None] = None,
    max_slew: Union[float, None] = None,
    raster_time: Union[float, None] = None,
    system: Union[Opts, None] = None,
) -> np.ndarray:
    """
    Create the shortest sampled trapezoidal gradient waveform with a given area.

    The waveform ramps up at the maximum slew rate, holds a plateau at `max_grad` if the area requires one (otherwise
    it is a triangle), and ramps down again. It is then scaled down so that its net area `sum(waveform) * raster_time`
    equals `area` exactly. Scaling never increases amplitude or slew, so the result stays within the limits.

    See Also
    --------
    - `epigrad.make_epi.make_epi()`
    - `epigrad.opts.Opts`

    Parameters
    ----------
    area : float
        Net area of the waveform (G/cm*ms). The sign sets the polarity.
    max_grad : float, default=None
        Maximum gradient amplitude (G/cm). Will default to `system.max_grad` if not provided.
    max_slew : float, default=None
        Maximum slew rate (G/cm/ms). Will default to `system.max_slew` if not provided.
    raster_time : float, default=None
        Sample interval (ms). Will default to `system.grad_raster_time` if not provided.
    system : Opts, default=Opts()
        System limits.

    Returns
    -------
    waveform : numpy.ndarray
        Trapezoidal gradient waveform (G/cm). The first and last samples are zero.

    Raises
    ------
    ValueError
        If `area` is zero.
        If `raster_time`, `max_grad` or `max_slew` is not positive.
    RuntimeError
        If the constructed waveform cannot be scaled down to the requested area.
    """
    if system is None:
        system = Opts.default

    if max_grad is None:
        max_grad = system.max_grad

    if max_slew is None:
        max_slew = system.max_slew

    if raster_time is None:
        raster_time = system.grad_raster_time

    if raster_time <= 0:
        raise ValueError(f'Raster time has to be larger than 0. Passed: {raster_time}')
    if max_grad <= 0 or max_slew <= 0:
        raise ValueError(f'Gradient limits must be positive. Passed: max_grad={max_grad}, max_slew={max_slew}')
    if area == 0:
        raise ValueError('Area cannot be 0.')

    # Do all calculations as positive then flip at end if negative
    sign = np.sign(area)
    area = abs(area)

    ramp_time = max_grad / max_slew  # time for ramp to full scale
    critical_area = max_slew * ramp_time**2
    dg = max_slew * raster_time  # largest step between samples

    if area < critical_area:
        # Triangle
        n = math.ceil(math.sqrt(area / max_slew) / raster_time)
        ramp = np.arange(n + 1) * dg
        waveform = np.concatenate((ramp, ramp[::-1]))
    else:
        n_ramp = math.ceil(ramp_time / raster_time)
        ramp = np.arange(n_ramp) * dg
        ramp_area = 2 * np.sum(ramp) * raster_time
        n_flat = math.ceil((area - ramp_area) / max_grad / raster_time)
        waveform = np.concatenate((ramp, np.full(n_flat, max_grad), ramp[::-1]))

    # Scale down to desired area
    waveform_area = np.sum(waveform) * raster_time
    if waveform_area < area * (1 - 1e-12):
        raise RuntimeError(
            f'Cannot scale trapezoid down to the requested area: built {waveform_area}, requested {area}.'
        )

    return sign * waveform * (area / waveform_area)
