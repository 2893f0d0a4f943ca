from functools import partial
from typing import Any, Callable, Optional, Union

from httpx import Response
from pydantic import BaseModel

from .._transport import AsyncTransport, Transport
from .._utils import RequestSpec
from .._utils._escape import format_query_value
from ..models.exceptions import ResponseCloseError, TransportError, TypedSearchError
from ._descriptor import EndpointDescriptor
from ._parameter_set import ParameterSet
from ._resolvers import negotiate_headers, resolve_body, resolve_path


class EndpointRequest:
    """Fluent configuration of one call to one endpoint.

    Every setter returns the same object so calls can be chained in any order.
    Besides the generic setters, each path and query parameter the endpoint
    declares is available as a method of its own name:

    ```python
    from typedsearch import TypedSearch

    client = TypedSearch()
    ok = client.ingest.get_pipeline().id("my-pipeline").summary(True).is_success()
    ```

    Instances are not safe for concurrent mutation.
    """

    def __init__(
        self,
        descriptor: EndpointDescriptor,
        transport: Optional[Union[Transport, AsyncTransport]] = None,
        *,
        compatibility_version: Optional[int] = None,
    ) -> None:
        self._descriptor = descriptor
        self._transport = transport
        self._compatibility_version = compatibility_version
        self._params = ParameterSet()

    def __getattr__(self, name: str) -> Callable[[Any], "EndpointRequest"]:
        if name.startswith("_"):
            raise AttributeError(name)

        descriptor = self._descriptor
        if name in descriptor.path_params:
            return partial(self.path_param, name)
        if name in descriptor.query_params:
            return partial(self.query, name)

        raise AttributeError(f"{descriptor.name} has no parameter {name!r}")

    def __dir__(self) -> list[str]:
        return sorted(
            set(super().__dir__())
            | self._descriptor.path_params
            | set(self._descriptor.query_params)
        )

    def __repr__(self) -> str:
        return f"EndpointRequest({self._descriptor.name!r}, path={self._params.path!r})"

    @property
    def descriptor(self) -> EndpointDescriptor:
        return self._descriptor

    @property
    def params(self) -> ParameterSet:
        return self._params

    def path_param(self, name: str, value: Any) -> "EndpointRequest":
        """Set a path parameter. Setting it again overwrites the value.

        Values render like query values, so a list of indices becomes one
        comma-joined segment.
        """
        self._params.path[name] = format_query_value(value)
        return self

    def query(self, name: str, value: Any) -> "EndpointRequest":
        """Set a query parameter. Booleans render as ``true``/``false``, sequences comma-joined."""
        self._params.query[name] = format_query_value(value)
        return self

    def header(self, key: str, value: str) -> "EndpointRequest":
        self._params.headers[key] = value
        return self

    def raw(self, body: Union[bytes, str]) -> "EndpointRequest":
        """Send ``body`` verbatim. Takes precedence over :meth:`request`."""
        self._params.raw = body.encode() if isinstance(body, str) else bytes(body)
        return self

    def request(self, payload: Union[BaseModel, dict[str, Any]]) -> "EndpointRequest":
        """Set the structured payload, serialized to JSON when the request is built."""
        self._params.payload = payload
        return self

    def build(self, timeout: Optional[float] = None) -> RequestSpec:
        """Resolve the current configuration into a request.

        Raises:
            BuildPathError: If no path variant matches the supplied path parameters.
            SerializationError: If the payload cannot be serialized.
        """
        method, path, query = resolve_path(self._descriptor, self._params)
        content = resolve_body(self._descriptor, self._params)
        headers = negotiate_headers(
            self._params.headers, content, self._compatibility_version
        )

        return RequestSpec(
            endpoint=self._descriptor.name,
            method=method,
            path=path,
            query=query,
            headers=headers,
            content=content,
            timeout=timeout,
        )

    def _require_transport(self, capability: type) -> Any:
        if not isinstance(self._transport, capability):
            raise TypedSearchError(
                f"{self._descriptor.name} has no {capability.__name__} to dispatch through"
            )
        return self._transport

    def do(self, timeout: Optional[float] = None) -> Response:
        """Build the request and run it through the transport.

        The returned response must be closed by the caller. Non-2xx statuses
        are returned, not raised.

        Raises:
            TransportError: If the transport could not obtain a response.
        """
        request = self.build(timeout)
        transport = self._require_transport(Transport)
        try:
            return transport.perform(request)
        except Exception as e:
            raise TransportError(self._descriptor.name, e) from e

    async def do_async(self, timeout: Optional[float] = None) -> Response:
        request = self.build(timeout)
        transport = self._require_transport(AsyncTransport)
        try:
            return await transport.perform_async(request)
        except Exception as e:
            raise TransportError(self._descriptor.name, e) from e

    def _drain_error(self, error: BaseException) -> BaseException:
        # cancellation and interrupts propagate untouched
        if isinstance(error, Exception):
            return TransportError(self._descriptor.name, error)
        return error

    def is_success(self, timeout: Optional[float] = None) -> bool:
        """Run the request and report whether it answered with a 2xx status.

        The response body is drained without buffering and released before
        returning.
        """
        response = self.do(timeout)
        try:
            if not response.is_stream_consumed:
                for _ in response.iter_raw():
                    pass
        except BaseException as e:
            error = self._drain_error(e)
            try:
                response.close()
            except Exception as close_error:
                error.add_note(f"releasing the response also failed: {close_error!r}")
            if error is e:
                raise
            raise error from e

        try:
            response.close()
        except Exception as e:
            raise ResponseCloseError(self._descriptor.name, e) from e

        return 200 <= response.status_code < 300

    async def is_success_async(self, timeout: Optional[float] = None) -> bool:
        response = await self.do_async(timeout)
        try:
            if not response.is_stream_consumed:
                async for _ in response.aiter_raw():
                    pass
        except BaseException as e:
            error = self._drain_error(e)
            try:
                await response.aclose()
            except Exception as close_error:
                error.add_note(f"releasing the response also failed: {close_error!r}")
            if error is e:
                raise
            raise error from e

        try:
            await response.aclose()
        except Exception as e:
            raise ResponseCloseError(self._descriptor.name, e) from e

        return 200 <= response.status_code < 300
