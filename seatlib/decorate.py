'''Result decorators applied after the allocation.

Decorators reshape a complete allocation result for presentation. They
return a new result and leave tie results alone, since a tie lists the tied
candidates rather than seats.
'''

import abc
from typing import Dict, List

from seatlib.candidate import Candidate
from seatlib.config import Configuration
from seatlib.result import Result
from seatlib.tally import Tally


class ResultDecorator(metaclass=abc.ABCMeta):
    '''Produce a reshaped copy of an allocation result.'''

    @abc.abstractmethod
    def decorate(self,
                 result: Result,
                 tally: Tally,
                 configuration: Configuration,
                 ) -> Result:
        '''Return a decorated copy of the result.

        :param result: The result to decorate.
        :param tally: The tally the result was allocated from.
        :param configuration: Allocation options.
        '''
        raise NotImplementedError


def _expand(counts: Dict[Candidate, int],
            order: List[Candidate],
            ) -> List[Candidate]:
    return [cand for cand in order for i in range(counts[cand])]


class GroupByCandidate(ResultDecorator):
    '''List the seats grouped by candidate, in tally order.

    Gives the same seat listing as the ``groupSeatsPerCandidate`` option.
    '''
    def decorate(self, result, tally, configuration):
        if result.is_tie:
            return result
        counts = result.seat_counts()
        order = [cand for cand in tally if cand in counts]
        return Result(result.type, _expand(counts, order))


class SortBySeats(ResultDecorator):
    '''List the seats grouped by candidate, most seats first.

    Candidates with equal numbers of seats keep the tally order.
    '''
    def decorate(self, result, tally, configuration):
        if result.is_tie:
            return result
        counts = result.seat_counts()
        order = sorted(
            (cand for cand in tally if cand in counts),
            key=lambda cand: counts[cand],
            reverse=True,
        )
        return Result(result.type, _expand(counts, order))
