from ._descriptor import RESERVED_NAMES, EndpointDescriptor, PathVariant
from ._endpoint_request import EndpointRequest
from ._namespace import EndpointFactory, Namespace
from ._parameter_set import ParameterSet
from ._resolvers import (
    media_type,
    negotiate_headers,
    resolve_body,
    resolve_path,
    serialize_payload,
)

__all__ = [
    "EndpointDescriptor",
    "EndpointFactory",
    "EndpointRequest",
    "Namespace",
    "ParameterSet",
    "PathVariant",
    "RESERVED_NAMES",
    "media_type",
    "negotiate_headers",
    "resolve_body",
    "resolve_path",
    "serialize_payload",
]
