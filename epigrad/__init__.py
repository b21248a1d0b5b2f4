# =========
# PACKAGE-LEVEL IMPORTS
# =========
from epigrad.calc_kspace import calc_kspace
from epigrad.check_gradient import check_gradient
from epigrad.convert import convert
from epigrad.make_epi import make_epi
from epigrad.make_trap_waveform import make_trap_waveform
from epigrad.opts import Opts
from epigrad.utils.plot_epi import plot_epi
