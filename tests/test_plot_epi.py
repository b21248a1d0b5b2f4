"""Tests for plot_epi() function."""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from epigrad import make_epi, plot_epi


@pytest.fixture(autouse=True)
def close_figures():
    plt.close('all')
    yield
    plt.close('all')


def test_plot_returns_figure_and_axes(default_epi):
    g, info = default_epi
    fig, axes = plot_epi(g, info, plot_now=False)

    assert isinstance(fig, plt.Figure)
    assert len(axes) == 2
    assert len(fig.get_axes()) == 2


def test_plot_gradient_lines(default_epi):
    g, info = default_epi
    _, (ax_grad, _) = plot_epi(g, info, plot_now=False)

    gx_line, gy_line = ax_grad.get_lines()[:2]
    np.testing.assert_array_equal(gx_line.get_ydata(), g[:, 0])
    np.testing.assert_array_equal(gy_line.get_ydata(), g[:, 1])
    # First readout trapezoid and first blip are shaded
    assert len(ax_grad.patches) == 2


def test_plot_kspace_trajectory(default_epi):
    g, info = default_epi
    _, (_, ax_k) = plot_epi(g, info, plot_now=False)

    trajectory = ax_k.get_lines()[0]
    np.testing.assert_allclose(trajectory.get_xdata().max(), 10, rtol=1e-9)
    np.testing.assert_allclose(trajectory.get_ydata().max(), 5, rtol=1e-9)


def test_plot_without_info():
    g, _ = make_epi(kxm=3, kym=3, nl=8)
    _, (ax_grad, _) = plot_epi(g, plot_now=False)

    assert len(ax_grad.patches) == 0


def test_plot_raster_time():
    g, info = make_epi(kxm=3, kym=3, nl=8, dt=0.01)
    _, (ax_grad, _) = plot_epi(g, info, raster_time=0.01, plot_now=False)

    t = ax_grad.get_lines()[0].get_xdata()
    assert t[-1] == pytest.approx((g.shape[0] - 1) * 0.01)
