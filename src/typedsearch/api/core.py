"""Core document and search endpoints."""

from .._endpoints import EndpointDescriptor, PathVariant
from ..models.core import ClosePointInTimeRequest, CountRequest

DOCS = "https://www.elastic.co/guide/en/elasticsearch/reference/current"

info = EndpointDescriptor(
    name="core.info",
    description="Returns basic information about the cluster.",
    variants=(PathVariant("GET", "/"),),
    docs_url=f"{DOCS}/index.html",
)

ping = EndpointDescriptor(
    name="core.ping",
    description="Returns whether the cluster is running.",
    variants=(PathVariant("HEAD", "/"),),
    docs_url=f"{DOCS}/index.html",
)

count = EndpointDescriptor(
    name="core.count",
    description="Returns number of documents matching a query.",
    variants=(
        PathVariant("POST", "/_count"),
        PathVariant("POST", "/{index}/_count"),
    ),
    query_params=(
        "allow_no_indices",
        "analyze_wildcard",
        "analyzer",
        "default_operator",
        "df",
        "expand_wildcards",
        "ignore_unavailable",
        "min_score",
        "preference",
        "q",
        "routing",
        "terminate_after",
    ),
    body=CountRequest,
    docs_url=f"{DOCS}/search-count.html",
)

delete = EndpointDescriptor(
    name="core.delete",
    description="Removes a document from the index.",
    variants=(PathVariant("DELETE", "/{index}/_doc/{id}"),),
    required=("index", "id"),
    query_params=(
        "if_primary_term",
        "if_seq_no",
        "refresh",
        "routing",
        "timeout",
        "version",
        "version_type",
        "wait_for_active_shards",
    ),
    docs_url=f"{DOCS}/docs-delete.html",
)

exists = EndpointDescriptor(
    name="core.exists",
    description="Returns information about whether a document exists in an index.",
    variants=(PathVariant("HEAD", "/{index}/_doc/{id}"),),
    required=("index", "id"),
    query_params=("preference", "realtime", "refresh", "routing", "version"),
    docs_url=f"{DOCS}/docs-get.html",
)

open_point_in_time = EndpointDescriptor(
    name="core.open_point_in_time",
    description="Open a point in time that can be used in subsequent searches.",
    variants=(PathVariant("POST", "/{index}/_pit"),),
    required=("index",),
    query_params=("keep_alive", "ignore_unavailable", "preference", "routing"),
    docs_url=f"{DOCS}/point-in-time-api.html",
)

close_point_in_time = EndpointDescriptor(
    name="core.close_point_in_time",
    description="Close a point in time.",
    variants=(PathVariant("DELETE", "/_pit"),),
    body=ClosePointInTimeRequest,
    docs_url=f"{DOCS}/point-in-time-api.html",
)

ENDPOINTS = {
    descriptor.operation: descriptor
    for descriptor in (
        info,
        ping,
        count,
        delete,
        exists,
        open_point_in_time,
        close_point_in_time,
    )
}
