'''Exceptions raised by Seatlib.

All of them derive from :class:`SeatAllocationError`, so a caller that does
not care about the exact reason can catch just that one. None of them signal
a transient condition; retrying with the same inputs fails again.

An unresolved tie is not an error: it is returned as a regular result of
the :attr:`seatlib.result.ResultType.TIE` type.
'''

from typing import Any, Optional


class SeatAllocationError(Exception):
    '''Seats could not be allocated with the given inputs.'''
    pass


class InvalidInputError(SeatAllocationError):
    '''The tally or configuration is missing or unusable.

    E.g. no tally at all, a tally without candidates, or a candidate with
    a negative number of votes.
    '''
    pass


class InvalidConfigurationError(SeatAllocationError):
    '''A configuration option has a malformed or out-of-range value.

    :param option: Name of the offending option.
    :param value: The raw value as found in the configuration.
    :param reason: What was expected instead, if known.
    '''
    def __init__(self, option: str, value: Any, reason: Optional[str] = None):
        self.option = option
        self.value = value
        self.reason = reason
        message = f'invalid value for option {option}: {value!r}'
        if reason:
            message += f', must be {reason}'
        super().__init__(message)


class UnresolvablePluginError(SeatAllocationError):
    '''No plugin is registered under the requested key.

    :param key: The key that was looked up.
    :param kind: Kind of plugin sought (method, tally filter, result
        decorator).
    '''
    def __init__(self, key: Any, kind: str):
        self.key = key
        self.kind = kind
        super().__init__(f'unknown {kind}: {key!r}')
