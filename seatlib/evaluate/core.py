'''General seat allocation method machinery.'''

import abc
from typing import Optional

from seatlib.config import Configuration
from seatlib.errors import InvalidInputError
from seatlib.result import Result
from seatlib.tally import Tally
from seatlib.tie import TieBreaker

__all__ = ['SeatAllocationMethod', 'check_inputs']


class SeatAllocationMethod(metaclass=abc.ABCMeta):
    '''Allocate seats to candidates of a tally.

    A root abstract base class for all methods.
    '''
    @abc.abstractmethod
    def process(self,
                tally: Tally,
                configuration: Configuration,
                tie_breaker: Optional[TieBreaker] = None,
                ) -> Result:
        '''Allocate seats to the candidates of the tally.

        :param tally: Candidates and their votes.
        :param configuration: Allocation options.
        :param tie_breaker: Decides exact ties; without one, every exact tie
            yields a tie result.
        :raises seatlib.errors.SeatAllocationError: If the inputs are
            invalid.
        '''
        raise NotImplementedError


def check_inputs(tally: Tally, configuration: Configuration) -> None:
    '''Check that a tally with candidates and a configuration were given.

    :raises InvalidInputError: If not.
    '''
    if tally is None:
        raise InvalidInputError('received tally was None')
    if configuration is None:
        raise InvalidInputError('received configuration was None')
    if len(tally) == 0:
        raise InvalidInputError('the tally contains no candidates')
