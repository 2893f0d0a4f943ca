from typing import Optional

import pytest
from httpx import Response

from typedsearch import Config, EndpointDescriptor, HttpxTransport, PathVariant
from typedsearch._utils import RequestSpec
from typedsearch._utils._user_agent import user_agent_value


class RecordingTransport:
    """In-memory transport returning canned responses and recording requests."""

    def __init__(
        self,
        response: Optional[Response] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.response = response if response is not None else Response(200)
        self.error = error
        self.requests: list[RequestSpec] = []

    def perform(self, request: RequestSpec) -> Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    async def perform_async(self, request: RequestSpec) -> Response:
        return self.perform(request)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "TYPEDSEARCH_URL",
        "TYPEDSEARCH_API_KEY",
        "TYPEDSEARCH_USERNAME",
        "TYPEDSEARCH_PASSWORD",
        "TYPEDSEARCH_COMPATIBILITY_VERSION",
        "TYPEDSEARCH_TIMEOUT",
        "TYPEDSEARCH_MAX_RETRIES",
        "TYPEDSEARCH_CA_CERTS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "http://search.example.com:9200"


@pytest.fixture
def api_key() -> str:
    return "secret-api-key"


@pytest.fixture
def version() -> str:
    return user_agent_value()


@pytest.fixture
def config(base_url: str, api_key: str) -> Config:
    return Config(base_url=base_url, api_key=api_key)


@pytest.fixture
def transport(config: Config) -> HttpxTransport:
    return HttpxTransport(config)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def widgets() -> EndpointDescriptor:
    return EndpointDescriptor(
        name="test.widgets",
        variants=(
            PathVariant("GET", "/widgets"),
            PathVariant("GET", "/widgets/{id}"),
        ),
        query_params=("pretty", "fields"),
    )


@pytest.fixture
def transport_factory() -> type[RecordingTransport]:
    return RecordingTransport
