from ._request_body import RequestBody
from .core import ClosePointInTimeRequest, CountRequest
from .exceptions import (
    BuildPathError,
    DispatchError,
    ResponseCloseError,
    SerializationError,
    TransportError,
    TypedSearchError,
)
from .indices import PutTemplateRequest
from .ingest import PutPipelineRequest
from .ml import RevertModelSnapshotRequest

__all__ = [
    "BuildPathError",
    "ClosePointInTimeRequest",
    "CountRequest",
    "DispatchError",
    "PutPipelineRequest",
    "PutTemplateRequest",
    "RequestBody",
    "ResponseCloseError",
    "RevertModelSnapshotRequest",
    "SerializationError",
    "TransportError",
    "TypedSearchError",
]
