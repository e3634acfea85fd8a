from .pipe_exceptions import PipeError, MissingCapabilityError, InvalidConfigurationError, InvalidHandlerError, ArityError
from .fn import Curried, curry, curry_n, arity_of
from .resolve import Runtime, DEFAULT_RUNTIME
from .pipe import pipe, Group
from .core import dotdict, PipeOptions, load_options, dump_options, report
