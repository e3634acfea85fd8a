"""
Pipeline of sync or async handlers with curried entry point.

    add_and_square = pipe(lambda a, b: a + b, lambda x: x * x)
    await add_and_square(5, 2)      # 49
    await add_and_square(5)(2)      # 49

Arguments and values returned by the handlers may be awaitables,
lists or tuples of awaitables; all are settled before the next handler is called.
Dict and numpy array arguments are shallow copied, so the handlers never
modify the caller's objects.
"""
import logging
from functools import wraps
from typing import *

from .fn import Curried, arity_of
from .pipe_exceptions import (_msg, MissingCapabilityError, InvalidConfigurationError, InvalidHandlerError,
                              ArityError)
from .resolve import Runtime, DEFAULT_RUNTIME, resolve, settle, discard
from .core.config import PipeOptions
from .core.report import report


class Group(tuple):
    """
    Explicit group of handlers, spliced into the handler list by `pipe`.
    pipe(Group((f, g)), h) == pipe(f, g, h)
    """
    def __new__(cls, handlers=()):
        return super().__new__(cls, handlers)


def flatten_handlers(handlers: Iterable) -> List[Any]:
    """
    Splice lists, tuples and Groups one level deep.
    """
    flat = []
    for item in handlers:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


def _check_runtime(runtime: Runtime):
    if not callable(runtime.gather):
        raise MissingCapabilityError(_msg(
            "Use a runtime providing `gather` to wait for concurrent awaitables."))
    if not callable(runtime.copy):
        raise MissingCapabilityError(_msg(
            "Use a runtime providing `copy` to duplicate sequence and record arguments."))


def _initial_stage(handler: Callable) -> Callable[..., Awaitable]:
    @wraps(handler, updated=())
    async def initial_stage(*values):
        return await settle(handler(*values))
    return initial_stage


def _stage(handler: Callable) -> Callable[[Any], Awaitable]:
    @wraps(handler, updated=())
    async def stage(value):
        return await settle(handler(value))
    return stage


def _reported(stage, options):
    return report(stage) if options.report else stage


def pipe(*handlers, runtime: Runtime = DEFAULT_RUNTIME, options: Mapping = None) -> Curried:
    """
    Return curried function piping its arguments through the `handlers`.

    :param handlers: initial handler followed by unary handlers,
        lists, tuples or Groups of handlers are spliced in.
        The initial handler may take any number of positional arguments.
    :param runtime: host primitives for fan-in and shallow copy
    :param options: mapping of PipeOptions values
    :return: Curried function with the arity of the initial handler, when applied to
        all arguments returns a coroutine with the final settled value.
    """
    _check_runtime(runtime)
    options = PipeOptions(options or {})

    rest = flatten_handlers(handlers)
    if not rest:
        raise InvalidConfigurationError(_msg("expects at least one argument"))
    initial = rest.pop(0)
    if not callable(initial):
        raise InvalidConfigurationError(_msg(
            "first handler must be a variadic function that returns an awaitable or value"))
    initial_arity = arity_of(initial)
    initial_stage = _reported(_initial_stage(initial), options)
    logging.debug(f"pipe: {len(rest) + 1} handlers, initial arity: {initial_arity}")

    async def execute(*args):
        if options.strict_arity and len(args) > initial_arity:
            discard(args)
            raise ArityError(initial_arity, len(args))
        discard(args[initial_arity:])
        args = args[:initial_arity]

        # All handlers are checked before the first one runs, so a failing call
        # never executes the stages preceding the non callable handler.
        stages = []
        for position, handler in enumerate(rest, start=2):
            if not callable(handler):
                discard(args)
                raise InvalidHandlerError(position, handler)
            stages.append(_reported(_stage(handler), options))

        values = await runtime.gather(*[settle(resolve(arg, runtime, duplicate=True)) for arg in args])
        result = await initial_stage(*values)
        for stage in stages:
            result = await stage(await settle(resolve(result, runtime)))
        return await settle(resolve(result, runtime))

    # surplus arguments reach `execute`, the overflow is reported on await
    return Curried(initial_arity, execute, keep_surplus=True)
