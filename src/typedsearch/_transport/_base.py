from typing import Protocol, runtime_checkable

from httpx import Response

from .._utils import RequestSpec


@runtime_checkable
class Transport(Protocol):
    """Performs a resolved request.

    Implementations own connection management, retries and timeouts. The
    returned response may be streamed; whoever receives it must close it.
    """

    def perform(self, request: RequestSpec) -> Response: ...


@runtime_checkable
class AsyncTransport(Protocol):
    async def perform_async(self, request: RequestSpec) -> Response: ...
