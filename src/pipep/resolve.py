"""
Resolution of values passed between pipeline stages.

Values are discriminated into a closed set of shapes:
 - awaitable: settled by awaiting (repeatedly, an awaitable may yield another one)
 - sequence: list or tuple, its elements are settled concurrently, order preserved
 - record: dict or numpy array, shallow copied at the pipeline entry
 - anything else: passed through unchanged
Strings and bytes are scalars.
"""
import asyncio
import inspect
from copy import copy as shallow_copy
from dataclasses import dataclass
from typing import *

import numpy as np


@dataclass(frozen=True)
class Runtime:
    """
    Host primitives used by the pipeline.
    gather: fan-in over awaitables, `gather(*aws)` -> awaitable of the list of results
    copy: shallow copy of a sequence or a record
    """
    gather: Optional[Callable[..., Awaitable[List[Any]]]] = asyncio.gather
    copy: Optional[Callable[[Any], Any]] = shallow_copy


DEFAULT_RUNTIME = Runtime()


def is_awaitable(value) -> bool:
    return inspect.isawaitable(value)


def is_sequence(value) -> bool:
    return isinstance(value, (list, tuple))


def is_record(value) -> bool:
    return isinstance(value, (dict, np.ndarray)) and not is_awaitable(value)


async def settle(value):
    while is_awaitable(value):
        value = await value
    return value


async def settle_all(items: Sequence, runtime: Runtime = DEFAULT_RUNTIME):
    """
    Settle all elements of `items` concurrently.
    Returns a tuple for a tuple input, a list otherwise.
    """
    results = await runtime.gather(*[settle(item) for item in items])
    if isinstance(items, tuple):
        return tuple(results)
    return list(results)


def resolve(value, runtime: Runtime = DEFAULT_RUNTIME, duplicate: bool = False):
    """
    Replace a sequence by an awaitable of its settled elements.
    With `duplicate` the sequence is copied before its elements are consumed
    and records are replaced by their shallow copies.
    Any other value is returned unchanged.
    """
    if is_sequence(value):
        if duplicate:
            value = runtime.copy(value)
        return settle_all(value, runtime)
    if duplicate and is_record(value):
        return runtime.copy(value)
    return value


def discard(values: Iterable):
    """
    Close coroutines among `values` and inside their sequences;
    used for arguments that will never be awaited.
    """
    for value in values:
        if inspect.iscoroutine(value):
            value.close()
        elif is_sequence(value):
            discard(value)
