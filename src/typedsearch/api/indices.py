from .._endpoints import EndpointDescriptor, PathVariant
from ..models.indices import PutTemplateRequest

DOCS = "https://www.elastic.co/guide/en/elasticsearch/reference/current"

_EXPAND = ("allow_no_indices", "expand_wildcards", "ignore_unavailable")

put_template = EndpointDescriptor(
    name="indices.put_template",
    description="Creates or updates a legacy index template.",
    variants=(PathVariant("PUT", "/_template/{name}"),),
    required=("name",),
    query_params=("create", "flat_settings", "master_timeout", "timeout", "order"),
    body=PutTemplateRequest,
    docs_url=f"{DOCS}/indices-templates-v1.html",
)

get_template = EndpointDescriptor(
    name="indices.get_template",
    description="Returns one or more legacy index templates.",
    variants=(
        PathVariant("GET", "/_template"),
        PathVariant("GET", "/_template/{name}"),
    ),
    query_params=("flat_settings", "local", "master_timeout"),
    docs_url=f"{DOCS}/indices-get-template-v1.html",
)

exists_template = EndpointDescriptor(
    name="indices.exists_template",
    description="Returns information about whether a legacy index template exists.",
    variants=(PathVariant("HEAD", "/_template/{name}"),),
    required=("name",),
    query_params=("flat_settings", "local", "master_timeout"),
    docs_url=f"{DOCS}/indices-template-exists-v1.html",
)

delete_template = EndpointDescriptor(
    name="indices.delete_template",
    description="Deletes a legacy index template.",
    variants=(PathVariant("DELETE", "/_template/{name}"),),
    required=("name",),
    query_params=("master_timeout", "timeout"),
    docs_url=f"{DOCS}/indices-delete-template-v1.html",
)

refresh = EndpointDescriptor(
    name="indices.refresh",
    description="Performs the refresh operation in one or more indices.",
    variants=(
        PathVariant("POST", "/_refresh"),
        PathVariant("POST", "/{index}/_refresh"),
    ),
    query_params=_EXPAND,
    docs_url=f"{DOCS}/indices-refresh.html",
)

ENDPOINTS = {
    descriptor.operation: descriptor
    for descriptor in (
        put_template,
        get_template,
        exists_template,
        delete_template,
        refresh,
    )
}
