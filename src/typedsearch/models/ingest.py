from typing import Any, Dict, List, Optional

from pydantic import Field

from ._request_body import RequestBody


class PutPipelineRequest(RequestBody):
    description: Optional[str] = None
    on_failure: Optional[List[Dict[str, Any]]] = None
    processors: Optional[List[Dict[str, Any]]] = None
    version: Optional[int] = None
    meta: Optional[Dict[str, Any]] = Field(default=None, alias="_meta")
