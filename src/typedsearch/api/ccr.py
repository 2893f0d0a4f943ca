from .._endpoints import EndpointDescriptor, PathVariant

DOCS = "https://www.elastic.co/guide/en/elasticsearch/reference/current"

unfollow = EndpointDescriptor(
    name="ccr.unfollow",
    description=(
        "Stops the following task associated with a follower index and removes "
        "index metadata and settings associated with cross-cluster replication."
    ),
    variants=(PathVariant("POST", "/{index}/_ccr/unfollow"),),
    required=("index",),
    docs_url=f"{DOCS}/ccr-post-unfollow.html",
)

pause_follow = EndpointDescriptor(
    name="ccr.pause_follow",
    description="Pauses a follower index.",
    variants=(PathVariant("POST", "/{index}/_ccr/pause_follow"),),
    required=("index",),
    docs_url=f"{DOCS}/ccr-post-pause-follow.html",
)

ENDPOINTS = {descriptor.operation: descriptor for descriptor in (unfollow, pause_follow)}
