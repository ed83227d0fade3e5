'''Named registers of components.

A register is a plain dictionary of components keyed by name, filled at
import time by a marking decorator. These factories build the decorator and
the retrieval functions around a register. There should normally be no need
to use them directly.
'''

from typing import Any, Callable, Dict, Optional, Union


def marker(register: Dict[str, Any],
           name: str,
           key: Optional[Callable[[Any], str]] = None,
           ) -> Callable[[Any], Any]:
    '''A registration decorator factory.

    :param key: Function computing the register key of the marked object;
        its ``__name__`` by default.
    '''
    def mark(obj):
        register[key(obj) if key else obj.__name__] = obj
        return obj
    return mark


def getter(register: Dict[str, Any], name: str) -> Callable[[str], Any]:
    '''A register retriever factory.'''
    def get(key: str) -> Any:
        try:
            return register[key]
        except (KeyError, TypeError):
            raise KeyError(f'unknown {name}: {key}')
    get.__doc__ = f'Return a {name} by its name.'
    return get


def constructer(register: Dict[str, Any],
                name: str,
                ) -> Callable[[Union[str, Callable]], Callable]:
    '''A register implicit retriever/passthrough function factory.'''
    get = getter(register, name)

    def construct(definition: Union[str, Callable]) -> Callable:
        return definition if callable(definition) else get(definition)

    construct.__doc__ = (
        f'Return a {name} by its name, or pass a custom callable through.'
    )
    return construct


def register_functions(register: Dict[str, Any], name: str):
    '''Construct the marker, getter and constructer functions at one call.'''
    return (
        marker(register, name),
        getter(register, name),
        constructer(register, name),
    )
