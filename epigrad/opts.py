from typing import Optional

from epigrad.convert import convert


class Opts:
    """
    System limits of an MR gradient system.

    Note: Default values can be overwritten by creating an Opts object and
    calling `set_as_default`.

    Attributes
    ----------
    gamma : float, default=4.258
        Gyromagnetic ratio in kHz/G. Default gamma is specified for Hydrogen. Only used for unit conversion; the
        waveform arithmetic works on areas directly.
    grad_raster_time : float, default=0.004
        Sample interval of gradient waveforms in ms.
    grad_unit : str, default='G/cm'
        Unit of maximum gradient amplitude. Must be one of 'G/cm', 'mT/m' or 'Hz/m'.
    max_grad : float, default=4 G/cm
        Maximum gradient amplitude.
    max_slew : float, default=15 G/cm/ms
        Maximum slew rate.
    slew_unit : str, default='G/cm/ms'
        Unit of maximum slew rate. Must be one of 'G/cm/ms', 'T/m/s', 'mT/m/ms' or 'Hz/m/s'.

    Raises
    ------
    ValueError
        If invalid `grad_unit` is passed. Must be one of 'G/cm', 'mT/m' or 'Hz/m'.
        If invalid `slew_unit` is passed. Must be one of 'G/cm/ms', 'T/m/s', 'mT/m/ms' or 'Hz/m/s'.
        If any of the limits is not strictly positive.
    """

    def __init__(
        self,
        gamma: Optional[float] = None,
        grad_raster_time: Optional[float] = None,
        grad_unit: str = 'G/cm',
        max_grad: Optional[float] = None,
        max_slew: Optional[float] = None,
        slew_unit: str = 'G/cm/ms',
    ):
        valid_grad_units = ['G/cm', 'mT/m', 'Hz/m']
        valid_slew_units = ['G/cm/ms', 'T/m/s', 'mT/m/ms', 'Hz/m/s']

        if grad_unit not in valid_grad_units:
            raise ValueError(f"Invalid gradient unit. Must be one of 'G/cm', 'mT/m' or 'Hz/m'. Passed: {grad_unit}")

        if slew_unit not in valid_slew_units:
            raise ValueError(
                f"Invalid slew rate unit. Must be one of 'G/cm/ms', 'T/m/s', 'mT/m/ms' or 'Hz/m/s'. Passed: {slew_unit}"
            )

        if gamma is None:
            gamma = Opts.default.gamma

        if max_grad is not None:
            max_grad = convert(from_value=max_grad, from_unit=grad_unit, to_unit='G/cm', gamma=abs(gamma))
        else:
            max_grad = Opts.default.max_grad

        if max_slew is not None:
            max_slew = convert(from_value=max_slew, from_unit=slew_unit, to_unit='G/cm/ms', gamma=abs(gamma))
        else:
            max_slew = Opts.default.max_slew

        if grad_raster_time is None:
            grad_raster_time = Opts.default.grad_raster_time

        for name, value in (
            ('gamma', gamma),
            ('grad_raster_time', grad_raster_time),
            ('max_grad', max_grad),
            ('max_slew', max_slew),
        ):
            if not value > 0:
                raise ValueError(f'`{name}` must be positive. Passed: {value}')

        self.gamma = gamma
        self.grad_raster_time = grad_raster_time
        self.max_grad = max_grad
        self.max_slew = max_slew

    def set_as_default(self):
        Opts.default = self

    @classmethod
    def reset_default(cls):
        # Bypass __init__, which reads from the default being created here.
        default = cls.__new__(cls)
        default.gamma = 4.258
        default.grad_raster_time = 4e-3
        default.max_grad = 4
        default.max_slew = 15
        cls.default = default

    def __str__(self) -> str:
        """
        Print a string representation of the system limits objects.
        """
        variables = vars(self)
        s = [f'{key}: {value}' for key, value in variables.items()]
        s = '\n'.join(s)
        s = 'System limits:\n' + s
        return s


Opts.reset_default()
