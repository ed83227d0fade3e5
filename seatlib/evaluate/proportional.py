'''Highest averages seat allocation.

The votes of each candidate are divided by a sequence of divisors, one per
round, giving a table of quotients (averages). Seats are then awarded one by
one, each to the largest quotient not used yet. The divisor sequence is the
only difference between D'Hondt, Sainte-Laguë and the other methods of the
family; see :mod:`seatlib.component.divisor`.
'''

import logging
from fractions import Fraction
from numbers import Number
from typing import List, Optional, Tuple, Union

import seatlib.component.divisor
from seatlib.candidate import Candidate
from seatlib.config import Configuration
from seatlib.errors import SeatAllocationError
from seatlib.evaluate.core import SeatAllocationMethod, check_inputs
from seatlib.result import Result, ResultType
from seatlib.tally import Tally
from seatlib.tie import TieBreaker

logger = logging.getLogger(__name__)

CONSUMED = None
'''Marks a quotient table cell that already won a seat.'''

QuotientTable = List[List[Optional[Fraction]]]


class HighestAverages(SeatAllocationMethod):
    '''Allocate seats by the highest averages of votes divided by divisors.

    For every round up to the number of seats, all candidates' votes are
    divided by the round's divisor. Each seat goes to the largest remaining
    quotient in the whole table, searched round by round and, within
    a round, in tally order. The quotients are exact rationals and compared
    for exact equality.

    When a quotient exactly equals the best one found so far for a seat,
    the candidate holding the best one and the newly found one are passed
    to the tie breaker, in that order. If it prefers the newcomer, the
    newcomer's quotient becomes the best one; the search then goes on over
    the rest of the table. If there is no tie breaker or it cannot decide,
    the allocation stops and returns a tie result listing the two
    candidates. Two equal cells of the same candidate are a tie as well, so
    a candidate with zero votes, or one whose overridden first divisor
    equals the second, may be offered to the tie breaker against itself.

    Recognized configuration options:

    -   ``numberOfSeats``: seats to allocate; the number of candidates by
        default.
    -   ``firstDivisor``: replaces the divisor of round zero. The divisor
        sequence still moves on, so round one gets its second divisor.
    -   ``groupSeatsPerCandidate``: list the seats of the result grouped by
        candidate in tally order, instead of in the order they were awarded.

    :param divisor_function: A callable giving the divisor for a zero-based
        round number, or the name of a built-in one from
        :mod:`seatlib.component.divisor`.
    '''
    def __init__(self,
                 divisor_function: Union[
                     str, seatlib.component.divisor.DivisorSequence
                 ] = 'dhondt',
                 ):
        self.divisor_function = seatlib.component.divisor.construct(
            divisor_function
        )

    def process(self,
                tally: Tally,
                configuration: Configuration,
                tie_breaker: Optional[TieBreaker] = None,
                ) -> Result:
        '''Allocate seats by highest averages.

        :param tally: Candidates and their votes; must not be empty.
        :param configuration: Allocation options, see the class description.
        :param tie_breaker: Decides exact ties between quotients.
        :returns: A result of the ``MULTIPLE`` type with one entry per seat,
            or of the ``TIE`` type with the two tied candidates.
        :raises InvalidInputError: If the tally or configuration is missing or
            the tally is empty.
        :raises InvalidConfigurationError: If an option value is malformed.
        '''
        check_inputs(tally, configuration)
        n_seats = configuration.number_of_seats(default=len(tally))
        first_divisor = configuration.first_divisor()
        group_seats = configuration.group_seats_per_candidate()
        logger.debug('allocating %d seats among %d candidates',
                     n_seats, len(tally))
        logger.debug('groupSeatsPerCandidate: %s', group_seats)
        quotients = self._quotient_table(tally, n_seats, first_divisor)
        seats_per_candidate = [0] * len(tally)
        result = Result(ResultType.MULTIPLE)
        for seat_i in range(n_seats):
            best_cand, best_round, tied = self._find_best(
                tally, quotients, n_seats, tie_breaker
            )
            if tied:
                logger.info('unresolved tie between %s and %s', *tied)
                return Result(ResultType.TIE, tied)
            winner = tally.candidate_at(best_cand)
            logger.debug('seat %d: maximum %s of %s in round %d', seat_i + 1,
                         quotients[best_cand][best_round], winner, best_round)
            seats_per_candidate[best_cand] += 1
            quotients[best_cand][best_round] = CONSUMED
            if not group_seats:
                result.add_seat(winner)
        for cand, n_cand_seats in zip(tally, seats_per_candidate):
            logger.info('%s ended with %d seats', cand, n_cand_seats)
        if group_seats:
            for cand, n_cand_seats in zip(tally, seats_per_candidate):
                for i in range(n_cand_seats):
                    result.add_seat(cand)
        return result

    def _quotient_table(self,
                        tally: Tally,
                        n_seats: int,
                        first_divisor: Optional[Fraction],
                        ) -> QuotientTable:
        '''Divide votes by the divisor of each round; one row per candidate.'''
        quotients = [[] for cand in tally]
        for round_i in range(n_seats):
            # always query the sequence so that the next rounds stay in phase
            divisor = self.divisor_function(round_i)
            if round_i == 0 and first_divisor is not None:
                divisor = first_divisor
            if not divisor > 0:
                raise SeatAllocationError(
                    f'divisor for round {round_i} must be positive,'
                    f' got {divisor}'
                )
            for row, cand in zip(quotients, tally):
                row.append(_quotient(cand.votes, divisor))
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug('round %d / %s: %s', round_i, divisor, ', '.join(
                    f'{float(row[round_i]):.2f}' for row in quotients
                ))
        return quotients

    @staticmethod
    def _find_best(tally: Tally,
                   quotients: QuotientTable,
                   n_rounds: int,
                   tie_breaker: Optional[TieBreaker],
                   ) -> Tuple[
                       Optional[int], Optional[int],
                       Optional[Tuple[Candidate, Candidate]]
                   ]:
        '''Find the cell with the largest remaining quotient.

        :returns: The candidate index and round of the best cell, and None;
            or the pair of candidates that could not be untied as the third
            item.
        '''
        best_cand = None
        best_round = None
        best_quot = None
        for round_i in range(n_rounds):
            for cand_i, row in enumerate(quotients):
                quot = row[round_i]
                if quot is CONSUMED:
                    continue
                elif best_quot is not None and quot == best_quot:
                    previous = tally.candidate_at(best_cand)
                    newcomer = tally.candidate_at(cand_i)
                    logger.debug('tie between %s and %s at %s',
                                 previous, newcomer, quot)
                    if tie_breaker is None:
                        return best_cand, best_round, (previous, newcomer)
                    logger.debug('using tie breaker %s', tie_breaker.name)
                    scenario = tie_breaker.break_tie(previous, newcomer)
                    if scenario is None or scenario.is_tied:
                        return best_cand, best_round, (previous, newcomer)
                    elif scenario.winner == newcomer:
                        best_cand = cand_i
                        best_round = round_i
                    elif scenario.winner != previous:
                        raise SeatAllocationError(
                            f'tie breaker {tie_breaker.name} preferred'
                            f' {scenario.winner}, which is not tied'
                        )
                elif best_quot is None or quot > best_quot:
                    best_cand = cand_i
                    best_round = round_i
                    best_quot = quot
        return best_cand, best_round, None


def _quotient(n_votes: Number, divisor: Number) -> Fraction:
    return Fraction(n_votes) / Fraction(divisor)
