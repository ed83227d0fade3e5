import sys
import os
import itertools

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.tie
from seatlib.candidate import Candidate
from seatlib.tie import TieScenario

A = Candidate('A', 100)
B = Candidate('B', 50)
C = Candidate('C', 100)
D = Candidate('D', 0)

BREAKERS = [
    seatlib.tie.MaxVotesTieBreaker(),
    seatlib.tie.MinVotesTieBreaker(),
    seatlib.tie.PriorityTieBreaker(['C', 'A']),
    seatlib.tie.PriorityTieBreaker(),
    seatlib.tie.RandomTieBreaker(seed=1711),
]


@pytest.mark.parametrize(('breaker', 'pair'), list(itertools.product(
    BREAKERS, itertools.combinations([A, B, C, D], 2)
)))
def test_symmetry(breaker, pair):
    cand_a, cand_b = pair
    forward = breaker.break_tie(cand_a, cand_b)
    backward = breaker.break_tie(cand_b, cand_a)
    assert forward.is_tied == backward.is_tied
    if not forward.is_tied:
        assert forward.winner in pair
        assert set(forward.ranking) == set(pair)


def test_max_votes():
    breaker = seatlib.tie.MaxVotesTieBreaker()
    assert breaker.break_tie(B, A) == TieScenario.prefer(A, B)
    assert breaker.break_tie(A, B).winner == A
    assert breaker.break_tie(A, C).is_tied


def test_min_votes():
    breaker = seatlib.tie.MinVotesTieBreaker()
    assert breaker.break_tie(A, B).winner == B
    assert breaker.break_tie(D, B).winner == D
    assert breaker.break_tie(C, A).is_tied
    assert breaker.break_tie(C, A).winner is None


def test_priority():
    breaker = seatlib.tie.PriorityTieBreaker([C, 'A'])
    assert breaker.break_tie(A, C).winner == C
    assert breaker.break_tie(A, B).winner == A
    assert breaker.break_tie(D, A).winner == A
    assert breaker.break_tie(B, D).is_tied


def test_random_reproducible():
    first = seatlib.tie.RandomTieBreaker(seed=5)
    second = seatlib.tie.RandomTieBreaker(seed=5)
    pairs = list(itertools.permutations([A, B, C, D], 2)) * 5
    assert (
        [first.break_tie(*pair) for pair in pairs]
        == [second.break_tie(*pair) for pair in pairs]
    )
    assert not any(first.break_tie(*pair).is_tied for pair in pairs)


def test_scenario():
    tied = TieScenario.tied(A, B)
    assert tied.is_tied
    assert tied.ranking == (A, B)
    assert tied.winner is None
    preferred = TieScenario.prefer(B, A)
    assert not preferred.is_tied
    assert preferred.winner == B
    assert preferred.ranking == (B, A)
    assert tied != preferred


def test_get():
    for name, cls in seatlib.tie.TIE_BREAKERS.items():
        assert seatlib.tie.get(name) is cls
        assert cls.name == name
    with pytest.raises(KeyError):
        seatlib.tie.get('coin')


def test_construct():
    breaker = seatlib.tie.construct('priority', ['B'])
    assert isinstance(breaker, seatlib.tie.PriorityTieBreaker)
    assert breaker.order == ['B']
    assert seatlib.tie.construct(breaker) is breaker
    assert isinstance(
        seatlib.tie.construct('random', seed=3),
        seatlib.tie.RandomTieBreaker
    )
