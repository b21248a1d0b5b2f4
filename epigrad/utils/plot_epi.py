from types import SimpleNamespace
from typing import Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from epigrad.calc_kspace import calc_kspace
from epigrad.opts import Opts


def plot_epi(
    g: np.ndarray,
    info: Union[SimpleNamespace, None] = None,
    raster_time: Union[float, None] = None,
    plot_now: bool = True,
    gx_color: str = 'blue',
    gy_color: str = 'red',
    line_width: float = 1.2,
) -> Tuple[plt.Figure, Tuple[plt.Axes, plt.Axes]]:
    """
    Plot EPI gradients over time next to the k-space trajectory they produce.

    Parameters
    ----------
    g : numpy.ndarray
        EPI gradients of shape [points, 2] (G/cm), as returned by `make_epi`.
    info : SimpleNamespace, default=None
        Index information returned by `make_epi`. If given, the first readout trapezoid and the first blip are
        shaded.
    raster_time : float, default=Opts().grad_raster_time
        Sample interval (ms).
    plot_now : bool, default=True
        If true, function immediately shows the plot, blocking the rest of the code until it is closed.
        If false, the plot is shown when plt.show() is called. Useful if the plot is to be modified.
    gx_color : color, default='blue'
        Color of the readout gradient and of the first readout shading.
    gy_color : color, default='red'
        Color of the phase-encode gradient and of the first blip shading.
    line_width : float, default=1.2
        Line width used in plots.

    Returns
    -------
    fig : matplotlib.figure.Figure
        Figure holding both axes.
    axes : tuple of matplotlib.axes.Axes
        (gradient axes, k-space axes).
    """
    if raster_time is None:
        raster_time = Opts.default.grad_raster_time

    g = np.asarray(g)
    t = np.arange(g.shape[0]) * raster_time
    k = calc_kspace(g, raster_time=raster_time)

    fig, (ax_grad, ax_k) = plt.subplots(1, 2, figsize=(12, 4))

    ax_grad.plot(t, g[:, 0], color=gx_color, linewidth=line_width, label='readout')
    ax_grad.plot(t, g[:, 1], color=gy_color, linewidth=line_width, label='phase-encode')
    if info is not None:
        # 1-based inclusive ranges to sample times
        ax_grad.axvspan(t[info.itrap[0] - 1], t[info.itrap[1] - 1], color=gx_color, alpha=0.1)
        ax_grad.axvspan(t[info.iblip[0] - 1], t[info.iblip[1] - 1], color=gy_color, alpha=0.1)
    ax_grad.axhline(0, color=(0.5, 0.5, 0.5), linewidth=0.5)
    ax_grad.set_xlabel('t (ms)')
    ax_grad.set_ylabel('G (G/cm)')
    ax_grad.legend(loc='upper right')

    ax_k.plot(k[:, 0], k[:, 1], color='black', linewidth=line_width)
    ax_k.plot(k[0, 0], k[0, 1], 'o', color=gx_color)
    ax_k.set_xlabel('kx')
    ax_k.set_ylabel('ky')
    ax_k.set_aspect('equal', adjustable='datalim')

    fig.tight_layout()

    if plot_now:
        plt.show()

    return fig, (ax_grad, ax_k)
