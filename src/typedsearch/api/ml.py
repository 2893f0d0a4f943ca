from .._endpoints import EndpointDescriptor, PathVariant
from ..models.ml import RevertModelSnapshotRequest

DOCS = "https://www.elastic.co/guide/en/elasticsearch/reference/current"

_SNAPSHOTS = "/_ml/anomaly_detectors/{job_id}/model_snapshots"

get_model_snapshots = EndpointDescriptor(
    name="ml.get_model_snapshots",
    description="Retrieves information about model snapshots.",
    variants=(
        PathVariant("GET", _SNAPSHOTS),
        PathVariant("GET", _SNAPSHOTS + "/{snapshot_id}"),
    ),
    required=("job_id",),
    query_params=("desc", "end", "from", "size", "sort", "start"),
    docs_url=f"{DOCS}/ml-get-snapshot.html",
)

revert_model_snapshot = EndpointDescriptor(
    name="ml.revert_model_snapshot",
    description="Reverts to a specific snapshot.",
    variants=(PathVariant("POST", _SNAPSHOTS + "/{snapshot_id}/_revert"),),
    required=("job_id", "snapshot_id"),
    query_params=("delete_intervening_results",),
    body=RevertModelSnapshotRequest,
    docs_url=f"{DOCS}/ml-revert-snapshot.html",
)

ENDPOINTS = {
    descriptor.operation: descriptor
    for descriptor in (get_model_snapshots, revert_model_snapshot)
}
