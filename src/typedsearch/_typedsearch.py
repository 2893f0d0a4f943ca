from logging import getLogger
from typing import Any, Optional, Union

from dotenv import load_dotenv

from ._config import Config
from ._endpoints import Namespace
from ._transport import AsyncTransport, HttpxTransport, Transport
from ._utils import setup_logging
from .api import REGISTRY


class TypedSearch:
    """Entry point exposing every catalogued endpoint.

    Settings not passed explicitly are read from ``TYPEDSEARCH_*``
    environment variables (a ``.env`` file is loaded first).

    ```python
    from typedsearch import TypedSearch

    client = TypedSearch(base_url="http://localhost:9200")
    response = client.ingest.get_pipeline().id("logs").do()
    try:
        print(response.read())
    finally:
        response.close()
    ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        transport: Optional[Union[Transport, AsyncTransport]] = None,
        debug: bool = False,
    ) -> None:
        load_dotenv()

        self._config = Config.from_env(
            base_url=base_url,
            api_key=api_key,
            username=username,
            password=password,
            debug=debug,
        )

        setup_logging(self._config.debug)
        log = getLogger("typedsearch")
        log.debug(f"CONFIG: {self._config}")

        # only a transport built here is closed by close() / aclose()
        self._owned_transport = (
            None if transport is not None else HttpxTransport(self._config)
        )
        self._transport = transport if transport is not None else self._owned_transport
        self._namespaces = {
            name: Namespace(
                name,
                endpoints,
                self._transport,
                compatibility_version=self._config.compatibility_version,
            )
            for name, endpoints in REGISTRY.items()
        }

    def close(self) -> None:
        if self._owned_transport is not None:
            self._owned_transport.close()

    async def aclose(self) -> None:
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    def __enter__(self) -> "TypedSearch":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "TypedSearch":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def transport(self) -> Union[Transport, AsyncTransport]:
        return self._transport

    @property
    def core(self) -> Namespace:
        return self._namespaces["core"]

    @property
    def ingest(self) -> Namespace:
        return self._namespaces["ingest"]

    @property
    def indices(self) -> Namespace:
        return self._namespaces["indices"]

    @property
    def ccr(self) -> Namespace:
        return self._namespaces["ccr"]

    @property
    def ml(self) -> Namespace:
        return self._namespaces["ml"]
