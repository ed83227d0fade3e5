'''Named allocation systems chaining filters, a method and decorators.'''

import logging
from typing import Iterable, Optional

from seatlib.config import Configuration
from seatlib.decorate import ResultDecorator
from seatlib.evaluate.core import SeatAllocationMethod, check_inputs
from seatlib.filter import TallyFilter
from seatlib.resolver import Resolver
from seatlib.result import Result
from seatlib.tally import Tally
from seatlib.tie import TieBreaker

logger = logging.getLogger(__name__)


class AllocationSystem:
    """A named allocation system.

    Runs the tally through the filters in turn, allocates the seats by the
    method and passes the result through the decorators in turn. Tie
    results are returned undecorated.

    :param name: Name of the system, e.g. the body to be elected.
    :param method: The allocation method.
    :param filters: Tally filters to apply before the allocation.
    :param decorators: Result decorators to apply after the allocation.
    """
    def __init__(self,
                 name: str,
                 method: SeatAllocationMethod,
                 filters: Iterable[TallyFilter] = (),
                 decorators: Iterable[ResultDecorator] = (),
                 ):
        self.name = name
        self.method = method
        self.filters = list(filters)
        self.decorators = list(decorators)

    @classmethod
    def from_keys(cls,
                  name: str,
                  resolver: Resolver,
                  method: str,
                  filters: Iterable[str] = (),
                  decorators: Iterable[str] = (),
                  ) -> 'AllocationSystem':
        """Assemble a system from plugin keys.

        :raises seatlib.errors.UnresolvablePluginError: If any of the keys
            is unknown to the resolver.
        """
        return cls(
            name,
            resolver.resolve_method(method),
            [resolver.resolve_tally_filter(key) for key in filters],
            [resolver.resolve_result_decorator(key) for key in decorators],
        )

    def process(self,
                tally: Tally,
                configuration: Configuration,
                tie_breaker: Optional[TieBreaker] = None,
                ) -> Result:
        """Allocate seats under the system."""
        check_inputs(tally, configuration)
        for tally_filter in self.filters:
            tally = tally_filter.filter(tally, configuration)
        logger.info('%s: allocating among %d candidates', self.name, len(tally))
        result = self.method.process(tally, configuration, tie_breaker)
        if result.is_tie:
            return result
        for decorator in self.decorators:
            result = decorator.decorate(result, tally, configuration)
        return result
