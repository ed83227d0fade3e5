'''Results of seat allocation.'''

import enum
from typing import Dict, Iterable, Iterator, Tuple

from seatlib.candidate import Candidate


class ResultType(enum.Enum):
    '''Classification of an allocation result.'''
    SINGLE = 'single'
    '''A single winner; produced by single-winner method families.'''
    MULTIPLE = 'multiple'
    '''A complete allocation of one or more seats.'''
    TIE = 'tie'
    '''An unresolved tie; the seats list the tied candidates.'''


class Result:
    '''An ordered sequence of seats and its classification.

    Each seat is a reference to the candidate that won it; a candidate that
    won several seats appears several times. For a tie, the seats are the
    tied candidates instead.

    :meth:`add_seat` is the only mutation, meant to be used by the method
    building the result. Once handed over to the caller, the result is to be
    treated as immutable.

    :param type: Classification of the result.
    :param seats: Initial seats.
    '''
    def __init__(self,
                 type: ResultType = ResultType.MULTIPLE,
                 seats: Iterable[Candidate] = (),
                 ):
        self.type = type
        self._seats = list(seats)

    def add_seat(self, candidate: Candidate) -> None:
        self._seats.append(candidate)

    @property
    def seats(self) -> Tuple[Candidate, ...]:
        return tuple(self._seats)

    @property
    def is_tie(self) -> bool:
        return self.type is ResultType.TIE

    def seat_counts(self) -> Dict[Candidate, int]:
        '''Return the number of seats per candidate, in order of first seat.

        Candidates with no seats do not appear.
        '''
        counts = {}
        for cand in self._seats:
            counts[cand] = counts.get(cand, 0) + 1
        return counts

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._seats)

    def __len__(self) -> int:
        return len(self._seats)

    def __eq__(self, other) -> bool:
        if isinstance(other, Result):
            return self.type == other.type and self._seats == other._seats
        return NotImplemented

    def __repr__(self) -> str:
        names = ', '.join(str(cand) for cand in self._seats)
        return f'<Result({self.type.name}: [{names}])>'
