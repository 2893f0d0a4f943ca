from typing import Optional

from pydantic import Field

from ._request_body import RequestBody


class RevertModelSnapshotRequest(RequestBody):
    delete_intervening_results: Optional[bool] = Field(
        default=None,
        description="Delete the results in the time period between the latest "
        "results and the time of the reverted snapshot",
    )
