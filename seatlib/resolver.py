'''Resolution of allocation methods, tally filters and result decorators by name.

Callers select a method such as ``dhondt`` or ``sainte-lague`` by its key
instead of hard-coding its type. The keys map to shared instances held in
a :class:`Registry`, which is filled once at startup and never changes
afterwards, so any number of allocations can query it at once.

:func:`default_registry` fills a registry with the built-in plugins; build
your own :class:`Registry` to add others.
'''

import logging
import types
from typing import Any, Dict, List, Mapping, Optional

from seatlib.decorate import ResultDecorator, GroupByCandidate, SortBySeats
from seatlib.errors import UnresolvablePluginError
from seatlib.evaluate.core import SeatAllocationMethod
from seatlib.evaluate.proportional import HighestAverages
from seatlib.filter import TallyFilter, RelativeThreshold, AbsoluteThreshold

logger = logging.getLogger(__name__)

METHOD = 'method'
TALLY_FILTER = 'tally filter'
RESULT_DECORATOR = 'result decorator'


class Registry:
    '''An immutable mapping of keys to plugins of each kind.

    :param methods: Allocation methods by key.
    :param tally_filters: Tally filters by key.
    :param result_decorators: Result decorators by key.
    '''
    def __init__(self,
                 methods: Optional[Mapping[str, SeatAllocationMethod]] = None,
                 tally_filters: Optional[Mapping[str, TallyFilter]] = None,
                 result_decorators: Optional[
                     Mapping[str, ResultDecorator]
                 ] = None,
                 ):
        self.methods = _frozen(methods)
        self.tally_filters = _frozen(tally_filters)
        self.result_decorators = _frozen(result_decorators)

    def __repr__(self) -> str:
        return (
            f'<Registry({len(self.methods)} methods,'
            f' {len(self.tally_filters)} filters,'
            f' {len(self.result_decorators)} decorators)>'
        )


def _frozen(plugins: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return types.MappingProxyType(dict(plugins or {}))


class Resolver:
    '''Look up plugins in a registry by their keys.

    :param registry: The registry to look into; the built-in one by default.
    '''
    def __init__(self, registry: Optional[Registry] = None):
        if registry is None:
            registry = default_registry()
        self.registry = registry

    def resolve_method(self, key: str) -> SeatAllocationMethod:
        '''Return the allocation method registered under the key.

        :raises UnresolvablePluginError: If there is no such method.
        '''
        return self._resolve(self.registry.methods, key, METHOD)

    def resolve_tally_filter(self, key: str) -> TallyFilter:
        '''Return the tally filter registered under the key.

        :raises UnresolvablePluginError: If there is no such filter.
        '''
        return self._resolve(self.registry.tally_filters, key, TALLY_FILTER)

    def resolve_result_decorator(self, key: str) -> ResultDecorator:
        '''Return the result decorator registered under the key.

        :raises UnresolvablePluginError: If there is no such decorator.
        '''
        return self._resolve(
            self.registry.result_decorators, key, RESULT_DECORATOR
        )

    def list_methods(self) -> List[str]:
        return sorted(self.registry.methods)

    def list_tally_filters(self) -> List[str]:
        return sorted(self.registry.tally_filters)

    def list_result_decorators(self) -> List[str]:
        return sorted(self.registry.result_decorators)

    @staticmethod
    def _resolve(plugins: Mapping[str, Any], key: str, kind: str) -> Any:
        try:
            plugin = plugins[key]
        except (KeyError, TypeError):
            raise UnresolvablePluginError(key, kind)
        logger.debug('resolved %s %s to %r', kind, key, plugin)
        return plugin


def default_registry() -> Registry:
    '''Return a registry with all the built-in plugins.'''
    methods: Dict[str, SeatAllocationMethod] = {
        'dhondt': HighestAverages('dhondt'),
        'sainte-lague': HighestAverages('sainte_lague'),
        'modified-sainte-lague': HighestAverages('modified_sainte_lague'),
        'imperiali': HighestAverages('imperiali'),
        'danish': HighestAverages('danish'),
        'macau': HighestAverages('macau'),
    }
    return Registry(
        methods=methods,
        tally_filters={
            'threshold': RelativeThreshold(),
            'minimum-votes': AbsoluteThreshold(),
        },
        result_decorators={
            'group-by-candidate': GroupByCandidate(),
            'sort-by-seats': SortBySeats(),
        },
    )


def default_resolver() -> Resolver:
    '''Return a resolver over the built-in plugins.'''
    return Resolver(default_registry())
