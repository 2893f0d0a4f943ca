import re
from dataclasses import dataclass, field
from typing import Mapping, Optional, Type

from pydantic import BaseModel

from .._utils._escape import escape_path_segment

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

# Public attributes of EndpointRequest; a parameter of the same name would
# never reach its named setter.
RESERVED_NAMES = frozenset(
    {
        "build",
        "descriptor",
        "do",
        "do_async",
        "header",
        "is_success",
        "is_success_async",
        "params",
        "path_param",
        "query",
        "raw",
        "request",
    }
)


@dataclass(frozen=True)
class PathVariant:
    """One (path parameters -> URL template, HTTP method) entry.

    The set of path parameters a variant requires is read from the
    ``{name}`` placeholders of its template, so the two can never disagree.

    Examples:
        >>> variant = PathVariant("GET", "/_ingest/pipeline/{id}")
        >>> variant.params
        frozenset({'id'})
        >>> variant.render({"id": "my pipeline"})
        '/_ingest/pipeline/my%20pipeline'
    """

    method: str
    template: str
    params: frozenset[str] = field(init=False)
    # even indexes are literal text, odd indexes are parameter names
    _parts: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.template.startswith("/"):
            raise ValueError(f"Path template must be absolute: {self.template!r}")

        parts = tuple(_PLACEHOLDER.split(self.template))
        names = parts[1::2]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate placeholder in {self.template!r}")

        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "params", frozenset(names))
        object.__setattr__(self, "_parts", parts)

    def render(self, values: Mapping[str, str]) -> str:
        """Interleave literal segments with percent-escaped parameter values."""
        rendered = []
        for index, part in enumerate(self._parts):
            if index % 2:
                rendered.append(escape_path_segment(values[part]))
            else:
                rendered.append(part)
        return "".join(rendered)


@dataclass(frozen=True)
class EndpointDescriptor:
    """Static description of one API operation.

    Args:
        name: Endpoint identity used in error messages, e.g. ``ingest.get_pipeline``.
        variants: Closed table of path variants. No two variants may require
            the same set of path parameters.
        query_params: Names of the optional query parameters the endpoint accepts.
        required: Path parameters taken positionally by the endpoint factory.
        body: Structured request body type, if the endpoint accepts a payload.
        docs_url: Reference documentation for the operation.
        description: One line summary of the operation.
    """

    name: str
    variants: tuple[PathVariant, ...]
    query_params: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    body: Optional[Type[BaseModel]] = None
    docs_url: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError(f"{self.name} declares no path variants")

        seen: set[frozenset[str]] = set()
        for variant in self.variants:
            if variant.params in seen:
                raise ValueError(
                    f"{self.name} declares more than one variant for path "
                    f"parameters {sorted(variant.params)}"
                )
            seen.add(variant.params)

        unknown = set(self.required) - self.path_params
        if unknown:
            raise ValueError(
                f"{self.name} requires undeclared path parameters {sorted(unknown)}"
            )

        shadowed = (self.path_params | set(self.query_params)) & RESERVED_NAMES
        if shadowed:
            raise ValueError(
                f"{self.name} declares parameters {sorted(shadowed)} that are "
                f"reserved by EndpointRequest"
            )

        clashing = self.path_params & set(self.query_params)
        if clashing:
            raise ValueError(
                f"{self.name} declares {sorted(clashing)} as both path and query parameters"
            )

    @property
    def path_params(self) -> frozenset[str]:
        return frozenset().union(*(variant.params for variant in self.variants))

    @property
    def namespace(self) -> str:
        return self.name.partition(".")[0]

    @property
    def operation(self) -> str:
        return self.name.rpartition(".")[2]

    def variant_for(self, present: frozenset[str]) -> Optional[PathVariant]:
        """Return the variant requiring exactly ``present``, if any."""
        for variant in self.variants:
            if variant.params == present:
                return variant
        return None
