def _msg(text):
    return f"[pipep] {text}"


class PipeError(Exception):
    pass


class MissingCapabilityError(PipeError):
    """
    A required runtime primitive (fan-in or shallow copy) was not supplied.
    """
    pass


class InvalidConfigurationError(PipeError):
    pass


class InvalidHandlerError(PipeError):
    """
    A non initial handler is not callable. Reported when the pipeline is awaited.
    """
    def __init__(self, position: int, value):
        self.position = position
        self.type_name = type(value).__name__
        self.value = value
        super().__init__(_msg(
            f"expected handler '{position}' to have type 'function', "
            f"got '{self.type_name}': '{value}'"))


class ArityError(PipeError):
    def __init__(self, arity: int, n_args: int):
        self.arity = arity
        self.n_args = n_args
        super().__init__(_msg(f"expected at most {arity} arguments, got {n_args}"))
