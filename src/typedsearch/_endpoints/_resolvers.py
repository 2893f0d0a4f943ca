"""Request construction steps.

Each step is a small pure function over an endpoint descriptor and its
parameters so it can be exercised without a transport.
"""

import json
from typing import Any, Optional

from httpx import Headers
from pydantic import BaseModel

from .._utils._escape import encode_query
from .._utils.constants import (
    DEFAULT_COMPATIBILITY_VERSION,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    MEDIA_TYPE_TEMPLATE,
)
from ..models.exceptions import BuildPathError, SerializationError
from ._descriptor import EndpointDescriptor
from ._parameter_set import ParameterSet


def media_type(compatibility_version: int = DEFAULT_COMPATIBILITY_VERSION) -> str:
    return MEDIA_TYPE_TEMPLATE.format(version=compatibility_version)


def resolve_path(
    descriptor: EndpointDescriptor, params: ParameterSet
) -> tuple[str, str, str]:
    """Pick the path variant matching exactly the supplied path parameters.

    Returns:
        tuple[str, str, str]: The HTTP method, the escaped absolute path and the
            encoded query string.

    Raises:
        BuildPathError: If no variant requires exactly the supplied parameters.
    """
    variant = descriptor.variant_for(params.present)
    if variant is None:
        raise BuildPathError(descriptor.name)

    return variant.method, variant.render(params.path), encode_query(params.query)


def serialize_payload(payload: Any) -> bytes:
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True, exclude_none=True).encode()
    return json.dumps(payload).encode()


def resolve_body(descriptor: EndpointDescriptor, params: ParameterSet) -> bytes:
    """Raw override first, then the serialized payload, then nothing.

    A raw override silently wins over a structured payload set on the same
    endpoint.
    """
    if params.raw is not None:
        return params.raw

    if params.payload is not None:
        try:
            return serialize_payload(params.payload)
        except (TypeError, ValueError) as e:
            raise SerializationError(descriptor.name, e) from e

    return b""


def negotiate_headers(
    headers: Headers,
    body: bytes,
    compatibility_version: Optional[int] = None,
) -> Headers:
    """Return a copy of ``headers`` with Accept and Content-Type filled in.

    Caller supplied values are kept as they are. Content-Type is only added
    when there is a body to describe.
    """
    negotiated = headers.copy()
    if compatibility_version is None:
        compatibility_version = DEFAULT_COMPATIBILITY_VERSION
    value = media_type(compatibility_version)

    if HEADER_CONTENT_TYPE not in negotiated and body:
        negotiated[HEADER_CONTENT_TYPE] = value
    if HEADER_ACCEPT not in negotiated:
        negotiated[HEADER_ACCEPT] = value

    return negotiated
