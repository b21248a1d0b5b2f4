import numpy as np
import pytest

from epigrad import Opts, make_epi


@pytest.fixture(autouse=True)
def reset_default_opts():
    """Restore the factory system limits after every test."""
    yield
    Opts.reset_default()


@pytest.fixture
def default_epi():
    """EPI waveform for kxm=10, kym=5, nl=4 with default system limits."""
    return make_epi(kxm=10, kym=5, nl=4)


@pytest.fixture
def assert_blocks():
    def check(g: np.ndarray, start: int, block: np.ndarray):
        """
        Check that `g[start:start + len(block)]` equals `block` exactly.
        """
        np.testing.assert_array_equal(g[start : start + len(block)], block)

    return check
