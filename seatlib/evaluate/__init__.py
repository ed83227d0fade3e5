'''Seat allocation methods.

A method takes a :class:`seatlib.tally.Tally`, a
:class:`seatlib.config.Configuration` and optionally a
:class:`seatlib.tie.TieBreaker` and returns a
:class:`seatlib.result.Result`. The result is either a complete allocation
or, if an exact tie could not be broken, a tie result listing the two tied
candidates.

Methods hold no state between calls and can be shared freely; the
:mod:`seatlib.resolver` hands out shared instances by name.
'''

from seatlib.evaluate.core import *    # noqa
