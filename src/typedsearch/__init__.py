"""Typed client for a search engine REST API.

Endpoints are data (:mod:`typedsearch.api`) interpreted by a single request
engine: fluent parameters in, a resolved request out, dispatched through a
pluggable transport.
"""

from ._config import Config
from ._endpoints import (
    EndpointDescriptor,
    EndpointFactory,
    EndpointRequest,
    Namespace,
    PathVariant,
)
from ._transport import AsyncTransport, HttpxTransport, Transport
from ._typedsearch import TypedSearch
from ._utils import RequestSpec
from .models.exceptions import (
    BuildPathError,
    DispatchError,
    ResponseCloseError,
    SerializationError,
    TransportError,
    TypedSearchError,
)

__all__ = [
    "AsyncTransport",
    "BuildPathError",
    "Config",
    "DispatchError",
    "EndpointDescriptor",
    "EndpointFactory",
    "EndpointRequest",
    "HttpxTransport",
    "Namespace",
    "PathVariant",
    "RequestSpec",
    "ResponseCloseError",
    "SerializationError",
    "Transport",
    "TransportError",
    "TypedSearch",
    "TypedSearchError",
]
