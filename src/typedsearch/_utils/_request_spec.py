from dataclasses import dataclass, field
from typing import Optional, Union

from httpx import Headers


@dataclass
class RequestSpec:
    """A fully resolved request, ready to be handed to a transport.

    Built fresh by every ``build()`` call from the current state of an
    endpoint; mutating the endpoint afterwards never changes an existing spec.
    """

    endpoint: str
    method: str
    path: str
    query: str = ""
    headers: Headers = field(default_factory=Headers)
    content: bytes = b""
    timeout: Optional[Union[int, float]] = None

    @property
    def url(self) -> str:
        """Absolute path with the encoded query string appended."""
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path
