from typing import Any, Dict, Optional

from pydantic import Field

from ._request_body import RequestBody


class ClosePointInTimeRequest(RequestBody):
    id: str = Field(description="Id of the point in time to close")


class CountRequest(RequestBody):
    query: Optional[Dict[str, Any]] = Field(
        default=None, description="Query DSL restricting the counted documents"
    )
