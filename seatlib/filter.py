'''Tally filters applied before the allocation.

The most common use is an electoral threshold that excludes small parties
from the allocation. Filters never modify the tally they receive; they
return a new one when any candidate is dropped.
'''

import abc
import logging
from fractions import Fraction
from numbers import Number
from typing import Optional

from seatlib.config import Configuration, THRESHOLD, MINIMUM_VOTES
from seatlib.errors import InvalidConfigurationError
from seatlib.tally import Tally

logger = logging.getLogger(__name__)


class TallyFilter(metaclass=abc.ABCMeta):
    '''Produce a modified tally to be passed to an allocation method.'''

    @abc.abstractmethod
    def filter(self, tally: Tally, configuration: Configuration) -> Tally:
        '''Return a filtered copy of the tally.

        :param tally: The tally to filter.
        :param configuration: Options that may parameterize the filter.
        '''
        raise NotImplementedError


def _passes(n_votes: Number, threshold: Number, accept_equal: bool) -> bool:
    return n_votes > threshold or accept_equal and n_votes == threshold


class RelativeThreshold(TallyFilter):
    '''Remove candidates with less than a fraction of total votes.

    The ``threshold`` configuration option, if set, overrides the threshold
    given here. Without any threshold, the tally passes unchanged.

    :param threshold: The threshold as a fraction of total votes, between
        0 and 1.
    :param accept_equal: Whether to keep candidates that only just reach the
        threshold.
    '''
    def __init__(self,
                 threshold: Optional[Number] = None,
                 accept_equal: bool = True,
                 ):
        self.threshold = threshold
        self.accept_equal = accept_equal

    def filter(self, tally: Tally, configuration: Configuration) -> Tally:
        threshold = configuration.get_number(THRESHOLD, self.threshold)
        if threshold is None:
            return tally
        if not 0 <= threshold <= 1:
            raise InvalidConfigurationError(
                THRESHOLD, configuration.get(THRESHOLD, threshold),
                'a fraction between 0 and 1'
            )
        total = tally.total_votes()
        if not total:
            return tally
        kept = tally.subset(
            cand for cand in tally
            if _passes(
                Fraction(cand.votes) / Fraction(total),
                threshold, self.accept_equal
            )
        )
        logger.info('threshold %s kept %d of %d candidates',
                    threshold, len(kept), len(tally))
        return kept


class AbsoluteThreshold(TallyFilter):
    '''Remove candidates with less than a given number of votes.

    The ``minimumVotes`` configuration option, if set, overrides the number
    given here. Without any minimum, the tally passes unchanged.

    :param minimum_votes: The threshold as a number of votes.
    :param accept_equal: Whether to keep candidates that only just reach the
        threshold.
    '''
    def __init__(self,
                 minimum_votes: Optional[Number] = None,
                 accept_equal: bool = True,
                 ):
        self.minimum_votes = minimum_votes
        self.accept_equal = accept_equal

    def filter(self, tally: Tally, configuration: Configuration) -> Tally:
        minimum = configuration.get_number(MINIMUM_VOTES, self.minimum_votes)
        if minimum is None:
            return tally
        if minimum < 0:
            raise InvalidConfigurationError(
                MINIMUM_VOTES, configuration.get(MINIMUM_VOTES, minimum),
                'a non-negative number'
            )
        kept = tally.subset(
            cand for cand in tally
            if _passes(Fraction(cand.votes), minimum, self.accept_equal)
        )
        logger.info('minimum of %s votes kept %d of %d candidates',
                    minimum, len(kept), len(tally))
        return kept
