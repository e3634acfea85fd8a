"""
Various function programming tools.

Currying with an explicit arity carried by the curried value, so that
wrappers generated at run time can report the arity of the function they wrap.
"""
import inspect
from functools import update_wrapper
from typing import *

from .pipe_exceptions import ArityError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class Curried:
    """
    Function `fn` waiting for `arity` positional arguments.

    Calling it with some arguments returns a new Curried with the arguments
    accumulated, the original is left unchanged. As soon as `arity` arguments
    are available `fn` is called with exactly the first `arity` of them
    and its result is returned as is.

    c = curry_n(3, f)
    c(1)(2, 3) == c(1, 2)(3) == c(1, 2, 3) == f(1, 2, 3)
    """
    def __init__(self, arity: int, fn: Callable, args: Tuple = (), strict: bool = False,
                 keep_surplus: bool = False):
        self.arity = arity
        self.fn = fn
        self.args = tuple(args)
        self.strict = strict
        # pass arguments over `arity` to `fn` as well, `fn` deals with them
        self.keep_surplus = keep_surplus
        update_wrapper(self, fn, updated=())

    def __call__(self, *args):
        all_args = self.args + args
        if len(all_args) < self.arity:
            return Curried(self.arity, self.fn, all_args, self.strict, self.keep_surplus)
        if self.keep_surplus:
            return self.fn(*all_args)
        if self.strict and len(all_args) > self.arity:
            raise ArityError(self.arity, len(all_args))
        return self.fn(*all_args[:self.arity])

    def __repr__(self):
        return f"Curried({self.fn!r}, arity={self.arity}, args={self.args})"


def arity_of(fn: Callable) -> int:
    """
    Declared arity of `fn`: number of leading positional parameters
    up to the first one with a default value or to `*args`.
    Curried values report the number of arguments they still wait for.
    Callables without introspectable signature are treated as unary.
    """
    if isinstance(fn, Curried):
        return max(fn.arity - len(fn.args), 0)
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return 1
    n = 0
    for p in params:
        if p.kind not in _POSITIONAL or p.default is not inspect.Parameter.empty:
            break
        n += 1
    return n


def curry_n(n: int, fn: Callable, strict: bool = False) -> Curried:
    """
    Curry `fn` to the explicit arity `n`.
    :param strict: raise ArityError instead of dropping the arguments over `n`.
    """
    return Curried(n, fn, strict=strict)


def curry(fn: Callable, strict: bool = False) -> Curried:
    """
    Curry `fn` to its own declared arity, see `arity_of`.
    """
    return curry_n(arity_of(fn), fn, strict)
