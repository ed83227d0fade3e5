import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from seatlib.candidate import Candidate
from seatlib.result import Result, ResultType

A = Candidate('A', 10)
B = Candidate('B', 5)


def test_add_seat():
    result = Result(ResultType.MULTIPLE)
    for cand in (A, B, A):
        result.add_seat(cand)
    assert result.seats == (A, B, A)
    assert list(result) == [A, B, A]
    assert len(result) == 3
    assert not result.is_tie


def test_seats_is_copy():
    result = Result(ResultType.MULTIPLE, [A])
    seats = result.seats
    result.add_seat(B)
    assert seats == (A,)


def test_seat_counts():
    result = Result(ResultType.MULTIPLE, [B, A, B, B])
    counts = result.seat_counts()
    assert counts == {B: 3, A: 1}
    assert list(counts) == [B, A]


def test_equality():
    assert Result(ResultType.TIE, [A, B]) == Result(ResultType.TIE, [A, B])
    assert Result(ResultType.TIE, [A, B]) != Result(ResultType.TIE, [B, A])
    assert Result(ResultType.TIE, [A]) != Result(ResultType.MULTIPLE, [A])
    assert Result(ResultType.TIE, [A, B]).is_tie
    assert repr(Result(ResultType.TIE, [A, B])) == '<Result(TIE: [A, B])>'
