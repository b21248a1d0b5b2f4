from typing import Iterable, Union


def convert(
    from_value: Union[float, Iterable],
    from_unit: str,
    gamma: float = 4.258,
    to_unit: str = str(),
) -> Union[float, Iterable]:
    """
    Converts gradient amplitude or slew rate from unit `from_unit` to unit `to_unit` with gyromagnetic ratio `gamma`.

    Parameters
    ----------
    from_value : float or numpy.ndarray
        Gradient amplitude or slew rate to convert from.
    from_unit : str
        Unit of gradient amplitude or slew rate to convert from.
    gamma : float, default=4.258
        Gyromagnetic ratio in kHz/G. Default is 4.258, for Hydrogen.
    to_unit : str, default=''
        Unit of gradient amplitude or slew rate to convert to. Defaults to 'G/cm' for gradients and 'G/cm/ms' for
        slew rates.

    Returns
    -------
    out : float or numpy.ndarray
        Converted gradient amplitude or slew rate.

    Raises
    ------
    ValueError
        If an invalid `from_unit` is passed. Must be one of 'G/cm', 'mT/m' or 'Hz/m' for gradients; or one of
        'G/cm/ms', 'T/m/s', 'mT/m/ms' or 'Hz/m/s' for slew rates.
        If an invalid `to_unit` is passed.
        If `from_unit` and `to_unit` do not belong to the same family.
    """
    valid_grad_units = ['G/cm', 'mT/m', 'Hz/m']
    valid_slew_units = ['G/cm/ms', 'T/m/s', 'mT/m/ms', 'Hz/m/s']
    valid_units = valid_grad_units + valid_slew_units

    if from_unit not in valid_units:
        raise ValueError(
            "Invalid from_unit. Must be one of 'G/cm', 'mT/m' or 'Hz/m' for gradients; "
            f"or must be one of 'G/cm/ms', 'T/m/s', 'mT/m/ms' or 'Hz/m/s' for slew rate. Passed: {from_unit}"
        )

    if to_unit != '' and to_unit not in valid_units:
        raise ValueError(
            "Invalid to_unit. Must be one of 'G/cm', 'mT/m' or 'Hz/m' for gradients; "
            f"or must be one of 'G/cm/ms', 'T/m/s', 'mT/m/ms' or 'Hz/m/s' for slew rate. Passed: {to_unit}"
        )

    if to_unit == '':
        if from_unit in valid_grad_units:
            to_unit = valid_grad_units[0]
        else:
            to_unit = valid_slew_units[0]

    if (from_unit in valid_grad_units) != (to_unit in valid_grad_units):
        raise ValueError(f'Cannot convert between a gradient and a slew rate unit: {from_unit} -> {to_unit}')

    # Hz/m per G/cm: 1e3 Hz/kHz * 1e2 cm/m
    hz_per_gauss_cm = gamma * 1e5

    # Convert to standard units
    # Grad units
    if from_unit == 'G/cm':
        standard = from_value
    elif from_unit == 'mT/m':
        standard = from_value / 10
    elif from_unit == 'Hz/m':
        standard = from_value / hz_per_gauss_cm
    # Slew units
    elif from_unit == 'G/cm/ms':
        standard = from_value
    elif from_unit == 'T/m/s' or from_unit == 'mT/m/ms':
        standard = from_value / 10
    elif from_unit == 'Hz/m/s':
        standard = from_value / hz_per_gauss_cm * 1e-3

    # Convert from standard units
    # Grad units
    if to_unit == 'G/cm':
        out = standard
    elif to_unit == 'mT/m':
        out = standard * 10
    elif to_unit == 'Hz/m':
        out = standard * hz_per_gauss_cm
    # Slew units
    elif to_unit == 'G/cm/ms':
        out = standard
    elif to_unit == 'T/m/s' or to_unit == 'mT/m/ms':
        out = standard * 10
    elif to_unit == 'Hz/m/s':
        out = standard * hz_per_gauss_cm * 1e3

    return out
