'''Divisor sequences of highest averages methods.

A divisor sequence maps the number of a round (starting at zero) to the
divisor by which every candidate's votes are divided in that round. It is
the only thing that distinguishes the individual highest averages methods,
so :class:`seatlib.evaluate.proportional.HighestAverages` takes one as its
sole parameter.

The sequences must be positive and non-decreasing; the seat-by-seat greedy
allocation only gives the intended result under that condition.

All built-in sequences are assembled in the `DIVISORS` dictionary keyed by
their function name. `get()` retrieves from it by name; `construct()` also
passes custom callables through.
'''

from fractions import Fraction
from numbers import Number
from typing import Callable, Union

import seatlib.component.core


DivisorSequence = Callable[[int], Number]

DIVISORS = {}


divisor_mark, get, construct = seatlib.component.core.register_functions(
    DIVISORS, 'divisor'
)


@divisor_mark
def dhondt(round_i: int) -> int:
    '''D'Hondt (Jefferson) divisors 1, 2, 3...

    The most widespread sequence; slightly favors larger parties.
    '''
    return round_i + 1


@divisor_mark
def sainte_lague(round_i: int) -> int:
    '''Sainte-Laguë (Webster) divisors 1, 3, 5...

    Treats large and small parties most evenly of the common sequences.
    '''
    return 2 * round_i + 1


@divisor_mark
def modified_sainte_lague(round_i: int) -> Fraction:
    '''Sainte-Laguë with the first divisor raised to 1.4.

    Used in Norway and Sweden to make the first seat harder to get.
    '''
    return Fraction(7, 5) if round_i == 0 else Fraction(2 * round_i + 1)


@divisor_mark
def imperiali(round_i: int) -> Fraction:
    '''Imperiali divisors 1, 1.5, 2...

    Strongly favors large parties.
    '''
    return 1 + Fraction(round_i, 2)


@divisor_mark
def danish(round_i: int) -> int:
    '''Danish divisors 1, 4, 7...

    Strongly favors small parties.
    '''
    return 3 * round_i + 1


@divisor_mark
def macau(round_i: int) -> int:
    '''Macau divisors 1, 2, 4, 8...'''
    return 2 ** round_i


def modified_first_coef(divisor_fx: Union[str, DivisorSequence],
                        first_coef: Number = Fraction(7, 5),
                        ) -> DivisorSequence:
    '''Replace the first divisor of a sequence by a fixed coefficient.

    For a one-off replacement, the ``firstDivisor`` configuration option does
    the same without wrapping the sequence.

    :param divisor_fx: The sequence to wrap, or its name.
    :param first_coef: The divisor for round zero.
    '''
    divisor_fx = construct(divisor_fx)
    if not isinstance(first_coef, (int, Fraction)):
        first_coef = Fraction(first_coef)

    def _modified_divisor(round_i: int) -> Number:
        return divisor_fx(round_i) if round_i > 0 else first_coef

    _modified_divisor.__name__ = f'{divisor_fx.__name__}_modified'
    return _modified_divisor
