from typing import Any, Iterator, Mapping, Optional, Union

from .._transport import AsyncTransport, Transport
from ._descriptor import EndpointDescriptor
from ._endpoint_request import EndpointRequest


class EndpointFactory:
    """Creates fresh :class:`EndpointRequest` objects for one descriptor.

    Required path parameters are taken positionally, in the order the
    descriptor declares them, and recorded exactly as the named setters would.
    """

    def __init__(
        self,
        descriptor: EndpointDescriptor,
        transport: Optional[Union[Transport, AsyncTransport]] = None,
        *,
        compatibility_version: Optional[int] = None,
    ) -> None:
        self.descriptor = descriptor
        self._transport = transport
        self._compatibility_version = compatibility_version
        self.__doc__ = descriptor.description or None

    def __call__(self, *required: Any) -> EndpointRequest:
        expected = self.descriptor.required
        if len(required) != len(expected):
            raise TypeError(
                f"{self.descriptor.name}() takes {len(expected)} positional "
                f"argument(s) ({', '.join(expected) or 'none'}) but "
                f"{len(required)} were given"
            )

        endpoint = EndpointRequest(
            self.descriptor,
            self._transport,
            compatibility_version=self._compatibility_version,
        )
        for name, value in zip(expected, required):
            endpoint.path_param(name, value)
        return endpoint

    def __repr__(self) -> str:
        return f"EndpointFactory({self.descriptor.name!r})"


class Namespace:
    """Groups the endpoint factories of one API namespace, e.g. ``ingest``."""

    def __init__(
        self,
        name: str,
        descriptors: Mapping[str, EndpointDescriptor],
        transport: Optional[Union[Transport, AsyncTransport]] = None,
        *,
        compatibility_version: Optional[int] = None,
    ) -> None:
        self.name = name
        self._factories = {
            operation: EndpointFactory(
                descriptor, transport, compatibility_version=compatibility_version
            )
            for operation, descriptor in descriptors.items()
        }

    def __getattr__(self, operation: str) -> EndpointFactory:
        if operation.startswith("_"):
            raise AttributeError(operation)
        try:
            return self._factories[operation]
        except KeyError:
            raise AttributeError(
                f"namespace {self.name!r} has no endpoint {operation!r}"
            ) from None

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._factories))

    def __iter__(self) -> Iterator[EndpointFactory]:
        return iter(self._factories.values())

    def __repr__(self) -> str:
        return f"Namespace({self.name!r}, endpoints={sorted(self._factories)!r})"
