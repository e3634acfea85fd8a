from functools import wraps
import inspect
import logging
import time


def _log_done(fn, duration):
    logging.info(f"DONE {fn.__module__}.{fn.__qualname__} @ {duration}")


def report(fn):
    """
    Log duration of every call of `fn`.
    Coroutine functions are timed until the coroutine finishes.
    """
    if inspect.iscoroutinefunction(fn):
        @wraps(fn)
        async def do_report_async(*args, **kwargs):
            init_time = time.perf_counter()
            result = await fn(*args, **kwargs)
            _log_done(fn, time.perf_counter() - init_time)
            return result
        return do_report_async

    @wraps(fn)
    def do_report(*args, **kwargs):
        init_time = time.perf_counter()
        result = fn(*args, **kwargs)
        _log_done(fn, time.perf_counter() - init_time)
        return result
    return do_report
