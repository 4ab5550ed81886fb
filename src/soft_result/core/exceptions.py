class BaseResultException(Exception):
    """Base exception class for envelope-specific exceptions."""

    def __init__(self, message: str = None, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidArgumentError(BaseResultException, ValueError):
    """Raised when an envelope or error is built from invalid input."""

    pass


class SerializationError(BaseResultException):
    """Raised when an envelope payload cannot be encoded as JSON."""

    pass
