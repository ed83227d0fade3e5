import sys
import os
import logging

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import seatlib.resolver
import seatlib.tie
from seatlib.config import Configuration
from seatlib.errors import InvalidInputError, UnresolvablePluginError
from seatlib.evaluate.proportional import HighestAverages
from seatlib.result import ResultType
from seatlib.system import AllocationSystem
from seatlib.tally import Tally

TALLY = Tally.from_votes({'A': 500, 'B': 300, 'C': 160, 'D': 40})


def names(result):
    return [cand.name for cand in result]


def test_allocsys_transp():
    dhondt = HighestAverages()
    allocsys = AllocationSystem('Tramtarie', dhondt)
    config = Configuration(numberOfSeats='6')
    assert allocsys.name == 'Tramtarie'
    assert allocsys.process(TALLY, config) == dhondt.process(TALLY, config)


def test_from_keys():
    resolver = seatlib.resolver.default_resolver()
    allocsys = AllocationSystem.from_keys(
        'Council', resolver, 'dhondt',
        filters=['threshold'], decorators=['sort-by-seats'],
    )
    config = Configuration(numberOfSeats='10', threshold='0.05')
    # A's fifth quotient ties with B's third; the larger party takes it
    result = allocsys.process(
        TALLY, config, seatlib.tie.MaxVotesTieBreaker()
    )
    assert result.type == ResultType.MULTIPLE
    assert names(result) == ['A'] * 6 + ['B'] * 3 + ['C']


def test_from_keys_unknown():
    resolver = seatlib.resolver.default_resolver()
    with pytest.raises(UnresolvablePluginError) as excinfo:
        AllocationSystem.from_keys(
            'Council', resolver, 'dhondt', decorators=['fancy']
        )
    assert excinfo.value.kind == 'result decorator'


def test_tie_skips_decorators():
    resolver = seatlib.resolver.default_resolver()
    allocsys = AllocationSystem.from_keys(
        'Council', resolver, 'dhondt', decorators=['group-by-candidate'],
    )
    tally = Tally.from_votes({'A': 10, 'B': 20, 'C': 10})
    result = allocsys.process(tally, Configuration(numberOfSeats='2'))
    assert result.type == ResultType.TIE
    assert names(result) == ['A', 'C']


def test_tie_breaker_passed():
    allocsys = AllocationSystem('Council', HighestAverages())
    tally = Tally.from_votes({'A': 10, 'B': 20, 'C': 10})
    result = allocsys.process(
        tally, Configuration(numberOfSeats='2'),
        seatlib.tie.PriorityTieBreaker(['C'])
    )
    assert names(result) == ['B', 'C']


def test_everything_filtered_out():
    allocsys = AllocationSystem.from_keys(
        'Council', seatlib.resolver.default_resolver(), 'dhondt',
        filters=['minimum-votes'],
    )
    with pytest.raises(InvalidInputError):
        allocsys.process(TALLY, Configuration(minimumVotes='1000'))


def test_missing_inputs():
    allocsys = AllocationSystem('Council', HighestAverages())
    with pytest.raises(InvalidInputError):
        allocsys.process(None, Configuration())
    with pytest.raises(InvalidInputError):
        allocsys.process(TALLY, None)


def test_logs(caplog):
    allocsys = AllocationSystem('Council', HighestAverages())
    with caplog.at_level(logging.INFO, logger='seatlib.system'):
        allocsys.process(TALLY, Configuration(numberOfSeats='2'))
    assert 'Council: allocating among 4 candidates' in caplog.text
