'''Candidates standing for seats, each with their tallied votes.

The name of a candidate (usually a party) can be any hashable object;
Seatlib never looks inside it. The votes are any non-negative real number
since some electoral systems count weighted or fractional votes.
'''

import math
from decimal import Decimal
from numbers import Number, Real
from typing import Hashable

from seatlib.errors import InvalidInputError


class Candidate:
    '''A candidate or party with its number of votes. Immutable.

    Candidates are identified by their name: two candidate objects with the
    same name compare equal and hash equally.

    :param name: Identity of the candidate, any hashable object.
    :param votes: Number of votes obtained; ``int``, ``Fraction``,
        ``Decimal`` or ``float``, must not be negative.
    :raises InvalidInputError: If the votes are not a non-negative number.
    '''
    __slots__ = ('_name', '_votes')

    def __init__(self, name: Hashable, votes: Number):
        if not is_valid_vote_count(votes):
            raise InvalidInputError(
                f'invalid vote count for candidate {name!r}: {votes!r}'
            )
        self._name = name
        self._votes = votes

    @property
    def name(self) -> Hashable:
        return self._name

    @property
    def votes(self) -> Number:
        return self._votes

    def __eq__(self, other) -> bool:
        if isinstance(other, Candidate):
            return self._name == other._name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f'<Candidate({self._name!r},{self._votes})>'

    def __str__(self) -> str:
        return str(self._name)


def is_valid_vote_count(votes: Number) -> bool:
    if isinstance(votes, bool):
        return False
    elif not isinstance(votes, (Real, Decimal)):
        return False
    elif isinstance(votes, Decimal):
        return votes.is_finite() and votes >= 0
    else:
        return math.isfinite(votes) and votes >= 0
