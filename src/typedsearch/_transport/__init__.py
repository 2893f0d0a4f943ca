from ._base import AsyncTransport, Transport
from ._httpx_transport import HttpxTransport

__all__ = [
    "AsyncTransport",
    "HttpxTransport",
    "Transport",
]
