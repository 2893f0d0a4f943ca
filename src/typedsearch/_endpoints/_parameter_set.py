from dataclasses import dataclass, field
from typing import Any, Optional

from httpx import Headers


@dataclass
class ParameterSet:
    """Everything a caller has configured on one endpoint invocation.

    The keys of ``path`` double as the presence set matched against the
    endpoint's path variants.
    """

    path: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)
    headers: Headers = field(default_factory=Headers)
    raw: Optional[bytes] = None
    payload: Optional[Any] = None

    @property
    def present(self) -> frozenset[str]:
        return frozenset(self.path)
