import warnings
from types import SimpleNamespace
from typing import Tuple, Union

import numpy as np

from epigrad.make_trap_waveform import make_trap_waveform
from epigrad.opts import Opts


def make_epi(
    kxm: float,
    kym: float,
    nl: int,
    system: Union[Opts, None] = None,
    dt: Union[float, None] = None,
    gam: Union[float, None] = None,
    gm: Union[float, None] = None,
    sm: Union[float, None] = None,
) -> Tuple[np.ndarray, SimpleNamespace]:
    """
    Create an EPI gradient waveform pair, with the readout along x and the phase-encode along y.

    The readout zig-zags over `nl` trapezoidal lobes of alternating polarity, the first one positive. A phase-encode
    blip follows every readout lobe except the last. Rephasers at either end move the trajectory from the k-space
    centre to the corner (-kxm, kym) before the first line and back to the centre after the last one.

    See Also
    --------
    - `epigrad.make_trap_waveform.make_trap_waveform()`
    - `epigrad.opts.Opts`

    Parameters
    ----------
    kxm : float
        Max kx position; total kx extent is +/- kxm (1/cm).
    kym : float
        Max ky position; total ky extent is +/- kym (1/cm).
    nl : int
        Number of lines, i.e. readout trapezoids. Must be at least 2.
    system : Opts, default=Opts()
        System limits.
    dt : float, default=None
        Sample time (ms). Will default to `system.grad_raster_time` if not provided.
    gam : float, default=None
        Gyromagnetic ratio (kHz/G). Will default to `system.gamma` if not provided. Accepted for completeness of the
        system description; it does not enter the waveform arithmetic.
    gm : float, default=None
        Max gradient amplitude (G/cm). Will default to `system.max_grad` if not provided.
    sm : float, default=None
        Max slew rate (G/cm/ms). Will default to `system.max_slew` if not provided.

    Returns
    -------
    g : numpy.ndarray
        EPI gradients of shape [points, 2] (G/cm). The 1st column contains the readout, the 2nd column the
        phase-encodes.
    info : SimpleNamespace
        Index information with the following attributes:
        - `ldep`: length of the (padded) rephasers.
        - `ltrap`: length of one readout trapezoid.
        - `lblip`: length of one phase-encode blip.
        - `itrap`: 1-based, inclusive index range of the first readout trapezoid in `g`.
        - `iblip`: 1-based, inclusive index range of the first blip in `g`.

    Raises
    ------
    ValueError
        If `nl` is not an integer of at least 2.
        If `kxm` or `kym` is not positive.
        If any of the system limits is not positive.
    """
    if system is None:
        system = Opts.default

    # Overrides are validated through Opts
    system = Opts(
        gamma=system.gamma if gam is None else gam,
        grad_raster_time=system.grad_raster_time if dt is None else dt,
        max_grad=system.max_grad if gm is None else gm,
        max_slew=system.max_slew if sm is None else sm,
    )
    dt = system.grad_raster_time
    gm = system.max_grad
    sm = system.max_slew

    if isinstance(nl, bool) or not isinstance(nl, (int, np.integer)) or nl < 2:
        raise ValueError(f'Number of lines `nl` must be an integer of at least 2. Passed: {nl}')
    if not kxm > 0:
        raise ValueError(f'`kxm` must be positive. Passed: {kxm}')
    if not kym > 0:
        raise ValueError(f'`kym` must be positive. Passed: {kym}')

    if 2 * kxm < gm**2 / sm:
        warnings.warn(
            f'Readout area {2 * kxm} is too small to reach max_grad ({gm} G/cm); readout trapezoids are triangular.'
        )

    # Readout gradient
    g1 = make_trap_waveform(area=2 * kxm, max_grad=gm, max_slew=sm, raster_time=dt)
    l1 = len(g1)

    # Phase-encode blip
    dky = 2 * kym / (nl - 1)
    g2 = make_trap_waveform(area=-dky, max_grad=gm, max_slew=sm, raster_time=dt)
    l2 = len(g2)

    # Rephasers, zero-padded to the same length
    g3 = make_trap_waveform(area=kxm, max_grad=gm, max_slew=sm, raster_time=dt)
    g4 = make_trap_waveform(area=kym, max_grad=gm, max_slew=sm, raster_time=dt)
    l3 = max(len(g3), len(g4))
    g3 = np.pad(g3, (0, l3 - len(g3)))
    g4 = np.pad(g4, (0, l3 - len(g4)))

    # nl readout lines with a blip in between each pair, and a rephaser at either end
    n_points = 2 * l3 + nl * (l1 + l2) - l2
    g = np.zeros((n_points, 2))

    g[:l3, 0] = -g3
    g[:l3, 1] = g4
    for i in range(nl):
        start = l3 + i * (l1 + l2)
        # Zig-zag readout, first line positive
        g[start : start + l1, 0] = (-1) ** i * g1
        if i < nl - 1:
            g[start + l1 : start + l1 + l2, 1] = g2
    g[-l3:, 0] = (-1) ** nl * g3
    g[-l3:, 1] = g4

    info = SimpleNamespace()
    info.ldep = l3
    info.ltrap = l1
    info.lblip = l2
    info.itrap = (l3 + 1, l3 + l1)
    info.iblip = (l3 + l1 + 1, l3 + l1 + l2)

    return g, info
