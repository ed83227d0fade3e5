import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.component.divisor as d

TEST_ORDERS = list(range(10)) + [100, 1000]


@pytest.mark.parametrize('order', TEST_ORDERS)
def test_positive(order):
    for fx in d.DIVISORS.values():
        assert fx(order) > 0


@pytest.mark.parametrize('fx_name', list(d.DIVISORS.keys()))
def test_non_decreasing(fx_name):
    fx = d.get(fx_name)
    divisors = [fx(order) for order in range(50)]
    assert divisors == sorted(divisors)


@pytest.mark.parametrize(('fx_name', 'expected'), [
    ('dhondt', [1, 2, 3, 4]),
    ('sainte_lague', [1, 3, 5, 7]),
    ('modified_sainte_lague', [Fraction(7, 5), 3, 5, 7]),
    ('imperiali', [1, Fraction(3, 2), 2, Fraction(5, 2)]),
    ('danish', [1, 4, 7, 10]),
    ('macau', [1, 2, 4, 8]),
])
def test_sequences(fx_name, expected):
    assert [d.get(fx_name)(order) for order in range(4)] == expected


def test_modified_first_coef():
    for fx in d.DIVISORS.values():
        modif = d.modified_first_coef(fx, 8654)
        assert modif(0) == 8654
        for i in TEST_ORDERS[1:]:
            assert modif(i) == fx(i)


def test_modified_first_coef_by_name():
    modif = d.modified_first_coef('sainte_lague', 1.4)
    assert modif(0) == Fraction(1.4)
    assert modif(2) == 5


def test_get():
    for fx_name, fx in d.DIVISORS.items():
        assert d.get(fx_name) == fx
    for bad_name in ('oapsdjf', '', None):
        with pytest.raises(KeyError):
            d.get(bad_name)


def test_construct():
    for fx_name, fx in d.DIVISORS.items():
        assert d.construct(fx_name) == d.get(fx_name) == fx
    for bad_name in ('oapsdjf', '', None):
        with pytest.raises(KeyError):
            d.construct(bad_name)
    def own_divf(order):
        return order + 2
    assert d.construct(own_divf) == own_divf
