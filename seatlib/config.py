'''Allocation options as a flat, read-only mapping.

Options are usually parsed by an external collaborator (command line flags,
a settings file...) into strings; the typed accessors of
:class:`Configuration` convert them and apply defaults. The defaults are not
stored in the mapping itself, so the same configuration can be read with
different defaults by different methods (e.g. the number of seats defaults
to the number of candidates of the tally being processed).

The option names below are recognized by the built-in methods and filters.
'''

import collections.abc
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from seatlib.errors import InvalidConfigurationError

NUMBER_OF_SEATS = 'numberOfSeats'
'''Number of seats to allocate, a non-negative integer.'''
FIRST_DIVISOR = 'firstDivisor'
'''Replacement for the first divisor of a highest averages method.'''
GROUP_SEATS_PER_CANDIDATE = 'groupSeatsPerCandidate'
'''Whether to list seats grouped by candidate instead of in award order.'''
THRESHOLD = 'threshold'
'''Minimum fraction of total votes to keep a candidate in the tally.'''
MINIMUM_VOTES = 'minimumVotes'
'''Minimum absolute number of votes to keep a candidate in the tally.'''

TRUE_STRINGS = frozenset(['true'])
FALSE_STRINGS = frozenset(['false'])


class Configuration(collections.abc.Mapping):
    '''A read-only mapping of option names to raw values.

    Raw values are usually strings but plain ints, fractions, decimals and
    booleans are accepted too. An option set to None or to a blank string
    counts as unset, so every typed accessor returns its default for it.

    :param options: Initial options; copied, so later changes to the passed
        mapping do not leak in.
    '''
    def __init__(self, options: Optional[Mapping[str, Any]] = None, **kwargs):
        self._options: Dict[str, Any] = dict(options or {})
        self._options.update(kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._options[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f'<Configuration({self._options!r})>'

    def get_int(self,
                option: str,
                default: Optional[int] = None,
                ) -> Optional[int]:
        '''Return an option as an integer.

        :param option: Option name.
        :param default: Value to return if the option is not set.
        :raises InvalidConfigurationError: If the value is not an integer.
        '''
        value = self._options.get(option)
        if _is_unset(value):
            return default
        elif isinstance(value, bool):
            raise InvalidConfigurationError(option, value, 'an integer')
        elif isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            raise InvalidConfigurationError(option, value, 'an integer')

    def get_number(self,
                   option: str,
                   default: Optional[Fraction] = None,
                   ) -> Optional[Fraction]:
        '''Return an option as an exact rational number.

        Decimal strings (``1.4``) and fractions (``7/5``) are accepted.

        :param option: Option name.
        :param default: Value to return if the option is not set.
        :raises InvalidConfigurationError: If the value is not a finite number.
        '''
        value = self._options.get(option)
        if _is_unset(value):
            return default
        elif isinstance(value, bool):
            raise InvalidConfigurationError(option, value, 'a number')
        try:
            return _to_fraction(value)
        except (ValueError, TypeError, ArithmeticError):
            raise InvalidConfigurationError(option, value, 'a number')

    def get_bool(self, option: str, default: bool = False) -> bool:
        '''Return an option as a boolean.

        Accepts ``true`` and ``false`` in any letter case.

        :param option: Option name.
        :param default: Value to return if the option is not set.
        :raises InvalidConfigurationError: If the value is not a boolean.
        '''
        value = self._options.get(option)
        if _is_unset(value):
            return default
        elif isinstance(value, bool):
            return value
        normalized = str(value).strip().lower()
        if normalized in TRUE_STRINGS:
            return True
        elif normalized in FALSE_STRINGS:
            return False
        else:
            raise InvalidConfigurationError(option, value, 'true or false')

    def number_of_seats(self, default: int) -> int:
        '''Return the number of seats to allocate.

        :param default: Number of seats if not configured, usually the number
            of candidates.
        :raises InvalidConfigurationError: If not a non-negative integer.
        '''
        n_seats = self.get_int(NUMBER_OF_SEATS, default)
        if n_seats < 0:
            raise InvalidConfigurationError(
                NUMBER_OF_SEATS, self._options.get(NUMBER_OF_SEATS),
                'a non-negative integer'
            )
        return n_seats

    def first_divisor(self) -> Optional[Fraction]:
        '''Return the first divisor override, or None if not configured.

        :raises InvalidConfigurationError: If not a positive number.
        '''
        divisor = self.get_number(FIRST_DIVISOR)
        if divisor is not None and divisor <= 0:
            raise InvalidConfigurationError(
                FIRST_DIVISOR, self._options.get(FIRST_DIVISOR),
                'a positive number'
            )
        return divisor

    def group_seats_per_candidate(self) -> bool:
        return self.get_bool(GROUP_SEATS_PER_CANDIDATE, False)


def _is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_fraction(value: Union[str, int, float, Decimal, Fraction]) -> Fraction:
    if isinstance(value, str):
        value = value.strip()
        if '/' not in value:
            # goes through Decimal to reject nan and infinity spelled out
            value = Decimal(value)
    if isinstance(value, Decimal) and not value.is_finite():
        raise ValueError(f'not a finite number: {value}')
    return Fraction(value)
