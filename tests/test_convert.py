"""Tests for the convert module"""

import numpy as np
import pytest
from epigrad import convert

conversions = [
    (1, 'G/cm', 'mT/m', 10),
    (10, 'mT/m', 'G/cm', 1),
    (1, 'G/cm', 'Hz/m', 4.258e5),
    (4.258e5, 'Hz/m', 'mT/m', 10),
    (1, 'G/cm/ms', 'T/m/s', 10),
    (1, 'G/cm/ms', 'mT/m/ms', 10),
    (150, 'T/m/s', 'G/cm/ms', 15),
    (1, 'G/cm/ms', 'Hz/m/s', 4.258e8),
    (4.258e8, 'Hz/m/s', 'T/m/s', 10),
]


@pytest.mark.parametrize('value,from_unit,to_unit,expected', conversions)
def test_conversions(value, from_unit, to_unit, expected):
    assert convert(from_value=value, from_unit=from_unit, to_unit=to_unit) == pytest.approx(expected)


@pytest.mark.parametrize('from_unit,expected', [('mT/m', 4), ('T/m/s', 15), ('Hz/m', 40 / 4.258e5)])
def test_default_to_unit(from_unit, expected):
    value = {'mT/m': 40, 'T/m/s': 150, 'Hz/m': 40}[from_unit]
    assert convert(from_value=value, from_unit=from_unit) == pytest.approx(expected)


def test_gamma():
    assert convert(from_value=1, from_unit='G/cm', to_unit='Hz/m', gamma=1.0705) == pytest.approx(1.0705e5)


def test_array():
    out = convert(from_value=np.array([0, 10, -20]), from_unit='mT/m', to_unit='G/cm')
    np.testing.assert_allclose(out, [0, 1, -2])


def test_invalid_from_unit_error():
    with pytest.raises(ValueError, match='Invalid from_unit.'):
        convert(from_value=1, from_unit='T/m')


def test_invalid_to_unit_error():
    with pytest.raises(ValueError, match='Invalid to_unit.'):
        convert(from_value=1, from_unit='G/cm', to_unit='T/m')


def test_mixed_family_error():
    with pytest.raises(ValueError, match='Cannot convert between a gradient and a slew rate unit'):
        convert(from_value=1, from_unit='G/cm', to_unit='T/m/s')
