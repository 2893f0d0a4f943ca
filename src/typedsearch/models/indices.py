from typing import Any, Dict, List, Optional

from ._request_body import RequestBody


class PutTemplateRequest(RequestBody):
    """Legacy index template body."""

    aliases: Optional[Dict[str, Any]] = None
    index_patterns: Optional[List[str]] = None
    mappings: Optional[Dict[str, Any]] = None
    order: Optional[int] = None
    settings: Optional[Dict[str, Any]] = None
    version: Optional[int] = None
