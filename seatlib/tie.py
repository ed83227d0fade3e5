'''Resolution of exact ties between two candidates.

When two cells of the quotient table are exactly equal, the allocation asks
a tie breaker which of the two candidates should be preferred. The tie
breaker answers with a :class:`TieScenario` - either an ordered preference
or an admission that the tie cannot be broken, which ends the allocation
with a tie result.

Tie breakers must be symmetric in their ability to decide: if
``break_tie(a, b)`` is tied, ``break_tie(b, a)`` must be tied as well.

All built-in tie breakers are assembled in the `TIE_BREAKERS` dictionary
keyed by a short name. `get()` retrieves the class by that name;
`construct()` also instantiates it.
'''

import abc
import random
from typing import Any, Hashable, Iterable, Optional, Tuple, Union

import seatlib.component.core
from seatlib.candidate import Candidate


class TieScenario:
    '''The outcome of a pairwise tie consultation.

    Use :meth:`tied` or :meth:`prefer` to create one.

    :param ranking: The two candidates; the preferred one first unless tied.
    :param is_tied: Whether no decision was possible.
    '''
    def __init__(self, ranking: Tuple[Candidate, Candidate], is_tied: bool):
        self.ranking = tuple(ranking)
        self.is_tied = is_tied

    @classmethod
    def tied(cls, candidate_a: Candidate, candidate_b: Candidate
             ) -> 'TieScenario':
        return cls((candidate_a, candidate_b), True)

    @classmethod
    def prefer(cls, winner: Candidate, loser: Candidate) -> 'TieScenario':
        return cls((winner, loser), False)

    @property
    def winner(self) -> Optional[Candidate]:
        '''The preferred candidate, or None if tied.'''
        return None if self.is_tied else self.ranking[0]

    def __eq__(self, other) -> bool:
        if isinstance(other, TieScenario):
            return (
                self.is_tied == other.is_tied
                and self.ranking == other.ranking
            )
        return NotImplemented

    def __repr__(self) -> str:
        a, b = self.ranking
        return f'<TieScenario({a} {"=" if self.is_tied else ">"} {b})>'


class TieBreaker(metaclass=abc.ABCMeta):
    '''Decide between two candidates whose quotients are exactly equal.'''

    name: str = NotImplemented
    '''Short name of the tie breaker, used in diagnostics.'''

    @abc.abstractmethod
    def break_tie(self,
                  candidate_a: Candidate,
                  candidate_b: Candidate,
                  ) -> TieScenario:
        '''Decide which of the two tied candidates is preferred.

        :param candidate_a: The candidate found first (the running best).
        :param candidate_b: The candidate found second.
        '''
        raise NotImplementedError


TIE_BREAKERS = {}

_mark = seatlib.component.core.marker(
    TIE_BREAKERS, 'tie breaker', key=lambda cls: cls.name
)
get = seatlib.component.core.getter(TIE_BREAKERS, 'tie breaker')


def construct(breaker_def: Union[str, TieBreaker],
              *args, **kwargs) -> TieBreaker:
    '''Return a tie breaker.

    :param breaker_def: A tie breaker instance, passed through unchanged,
        or the name of a built-in one, which is then instantiated with the
        remaining arguments.
    '''
    if isinstance(breaker_def, TieBreaker):
        return breaker_def
    return get(breaker_def)(*args, **kwargs)


@_mark
class MaxVotesTieBreaker(TieBreaker):
    '''Prefer the candidate with more votes; equal votes stay tied.

    In highest averages methods, a tie between quotients of different rounds
    usually pits a larger party against a smaller one; this gives the seat
    to the larger party.
    '''
    name = 'max_votes'

    def break_tie(self, candidate_a, candidate_b):
        if candidate_a.votes > candidate_b.votes:
            return TieScenario.prefer(candidate_a, candidate_b)
        elif candidate_b.votes > candidate_a.votes:
            return TieScenario.prefer(candidate_b, candidate_a)
        else:
            return TieScenario.tied(candidate_a, candidate_b)


@_mark
class MinVotesTieBreaker(TieBreaker):
    '''Prefer the candidate with fewer votes; equal votes stay tied.'''
    name = 'min_votes'

    def break_tie(self, candidate_a, candidate_b):
        if candidate_a.votes < candidate_b.votes:
            return TieScenario.prefer(candidate_a, candidate_b)
        elif candidate_b.votes < candidate_a.votes:
            return TieScenario.prefer(candidate_b, candidate_a)
        else:
            return TieScenario.tied(candidate_a, candidate_b)


@_mark
class PriorityTieBreaker(TieBreaker):
    '''Prefer the candidate that comes first in a given order.

    Useful with an externally determined order, e.g. ballot numbers or a lot
    drawn beforehand. A listed candidate beats an unlisted one; two unlisted
    candidates stay tied.

    :param order: Candidates or their names, most preferred first.
    '''
    name = 'priority'

    def __init__(self, order: Iterable[Union[Candidate, Hashable]] = ()):
        self.order = [
            cand.name if isinstance(cand, Candidate) else cand
            for cand in order
        ]
        self._positions = {name: i for i, name in enumerate(self.order)}

    def break_tie(self, candidate_a, candidate_b):
        pos_a = self._positions.get(candidate_a.name)
        pos_b = self._positions.get(candidate_b.name)
        if pos_a is None and pos_b is None:
            return TieScenario.tied(candidate_a, candidate_b)
        elif pos_b is None or (pos_a is not None and pos_a < pos_b):
            return TieScenario.prefer(candidate_a, candidate_b)
        else:
            return TieScenario.prefer(candidate_b, candidate_a)


@_mark
class RandomTieBreaker(TieBreaker):
    '''Prefer one of the candidates at random. Never ties.

    You can make the choices reproducible with a seed, but be careful with
    that in a real-world setting.

    :param seed: Seed for the random generator.
    '''
    name = 'random'

    def __init__(self, seed: Optional[Any] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def break_tie(self, candidate_a, candidate_b):
        if self._random.random() < 0.5:
            return TieScenario.prefer(candidate_a, candidate_b)
        else:
            return TieScenario.prefer(candidate_b, candidate_a)
