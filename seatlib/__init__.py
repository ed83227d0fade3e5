"""Seatlib - a library for allocating seats by election results.

Seatlib distributes a fixed number of seats among candidates (usually
parties) according to their votes. It consists of the following parts:

-   The input: a :class:`tally.Tally` of :class:`candidate.Candidate` objects
    with their votes, and a :class:`config.Configuration` of allocation
    options such as the number of seats.
-   Allocation methods in the ``evaluate`` subpackage, chiefly the highest
    averages family (D'Hondt, Sainte-Laguë...) parameterized by divisor
    sequences from :mod:`component.divisor`.
-   Tie breakers from the :mod:`tie` module, consulted when two quotients
    are exactly equal.
-   The output: a :class:`result.Result` listing the seats, or the tied
    candidates if a tie could not be broken.

Methods, tally filters and result decorators can be looked up by name
through the :mod:`resolver` module; the :class:`system.AllocationSystem`
chains them into a complete allocation.
"""
