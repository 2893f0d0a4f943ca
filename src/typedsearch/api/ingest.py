from .._endpoints import EndpointDescriptor, PathVariant
from ..models.ingest import PutPipelineRequest

DOCS = "https://www.elastic.co/guide/en/elasticsearch/reference/current"

get_pipeline = EndpointDescriptor(
    name="ingest.get_pipeline",
    description="Returns a pipeline.",
    variants=(
        PathVariant("GET", "/_ingest/pipeline"),
        PathVariant("GET", "/_ingest/pipeline/{id}"),
    ),
    query_params=("master_timeout", "summary"),
    docs_url=f"{DOCS}/get-pipeline-api.html",
)

put_pipeline = EndpointDescriptor(
    name="ingest.put_pipeline",
    description="Creates or updates a pipeline.",
    variants=(PathVariant("PUT", "/_ingest/pipeline/{id}"),),
    required=("id",),
    query_params=("if_version", "master_timeout", "timeout"),
    body=PutPipelineRequest,
    docs_url=f"{DOCS}/put-pipeline-api.html",
)

delete_pipeline = EndpointDescriptor(
    name="ingest.delete_pipeline",
    description="Deletes a pipeline.",
    variants=(PathVariant("DELETE", "/_ingest/pipeline/{id}"),),
    required=("id",),
    query_params=("master_timeout", "timeout"),
    docs_url=f"{DOCS}/delete-pipeline-api.html",
)

ENDPOINTS = {
    descriptor.operation: descriptor
    for descriptor in (get_pipeline, put_pipeline, delete_pipeline)
}
