class TypedSearchError(Exception):
    """Base class for every error raised by typedsearch."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class BuildPathError(TypedSearchError, ValueError):
    """Raised when no path variant matches the supplied path parameters.

    The request is never handed to the transport.
    """

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(
            f"cannot build path for {endpoint}, check for missing path parameters"
        )


class SerializationError(TypedSearchError):
    """Raised when a request payload cannot be converted to or from JSON."""

    def __init__(self, endpoint: str, error: BaseException):
        self.endpoint = endpoint
        self.error = error
        super().__init__(f"could not serialise request for {endpoint}: {error}")


class DispatchError(TypedSearchError):
    """Raised when dispatching a built request fails.

    The underlying exception is available as ``error`` and ``__cause__``.
    """

    def __init__(self, endpoint: str, error: BaseException, message: str):
        self.endpoint = endpoint
        self.error = error
        super().__init__(message)


class TransportError(DispatchError):
    def __init__(self, endpoint: str, error: BaseException):
        super().__init__(
            endpoint,
            error,
            f"an error happened during the {endpoint} query execution: {error}",
        )


class ResponseCloseError(DispatchError):
    def __init__(self, endpoint: str, error: BaseException):
        super().__init__(
            endpoint,
            error,
            f"could not release the {endpoint} response body: {error}",
        )
