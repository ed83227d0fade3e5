'''An immutable, ordered tally of candidates and their votes.

The order of the tally matters: the allocation scans candidates in this
order, so it decides which of two tied candidates is met first.
'''

from fractions import Fraction
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Union
from numbers import Number

from seatlib.candidate import Candidate
from seatlib.errors import InvalidInputError


class Tally:
    '''An ordered sequence of candidates with their votes.

    Exposes no mutation; filters produce new tallies instead.

    :param candidates: Candidates in the tally order. Their names must be
        unique.
    :raises InvalidInputError: If a name is repeated or an item is not
        a :class:`Candidate`.
    '''
    def __init__(self, candidates: Iterable[Candidate] = ()):
        self._candidates = tuple(candidates)
        self._index = {}
        for i, cand in enumerate(self._candidates):
            if not isinstance(cand, Candidate):
                raise InvalidInputError(f'not a candidate: {cand!r}')
            if cand.name in self._index:
                raise InvalidInputError(f'duplicate candidate: {cand.name!r}')
            self._index[cand.name] = i

    @classmethod
    def from_votes(cls, votes: Dict[Hashable, Number]) -> 'Tally':
        '''Create a tally from a mapping of candidate names to votes.

        The tally follows the ordering of the mapping.
        '''
        return cls(Candidate(name, n_votes) for name, n_votes in votes.items())

    @property
    def number_of_candidates(self) -> int:
        return len(self._candidates)

    def candidate_at(self, index: int) -> Candidate:
        return self._candidates[index]

    def index_of(self, candidate: Union[Candidate, Hashable]) -> int:
        '''Return the position of the candidate in the tally.

        :param candidate: A candidate object or just its name.
        :raises InvalidInputError: If the candidate is not in the tally.
        '''
        name = candidate.name if isinstance(candidate, Candidate) else candidate
        try:
            return self._index[name]
        except KeyError:
            raise InvalidInputError(f'candidate not in tally: {name!r}')

    def votes(self) -> Dict[Hashable, Number]:
        '''Return the votes as an ordered mapping of names to vote counts.'''
        return {cand.name: cand.votes for cand in self._candidates}

    def total_votes(self) -> Fraction:
        '''Return the sum of all votes as an exact fraction.'''
        return sum(
            (Fraction(cand.votes) for cand in self._candidates), Fraction(0)
        )

    def subset(self, candidates: Iterable[Any]) -> 'Tally':
        '''Return a new tally with just the given candidates, in tally order.

        :param candidates: Candidates (or their names) to keep.
        '''
        keep = {
            cand.name if isinstance(cand, Candidate) else cand
            for cand in candidates
        }
        return Tally(cand for cand in self._candidates if cand.name in keep)

    def __len__(self) -> int:
        return len(self._candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self._candidates[index]

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    def __contains__(self, candidate: Any) -> bool:
        name = candidate.name if isinstance(candidate, Candidate) else candidate
        return name in self._index

    def __eq__(self, other) -> bool:
        if isinstance(other, Tally):
            return self.candidate_list() == other.candidate_list() and all(
                mine.votes == theirs.votes
                for mine, theirs in zip(self._candidates, other._candidates)
            )
        return NotImplemented

    def __repr__(self) -> str:
        return f'<Tally({list(self._candidates)!r})>'

    def candidate_list(self) -> List[Candidate]:
        return list(self._candidates)
