import pytest
from httpx import Response

from typedsearch import EndpointRequest, HttpxTransport, TypedSearch


class TestTypedSearch:
    def test_default_transport(self):
        client = TypedSearch(base_url="http://localhost:9200")

        assert isinstance(client.transport, HttpxTransport)

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TYPEDSEARCH_URL", "https://es.example.com")
        monkeypatch.setenv("TYPEDSEARCH_API_KEY", "1234567890")

        client = TypedSearch()

        assert client._config.base_url == "https://es.example.com"
        assert client._config.api_key == "1234567890"

    def test_namespaces_expose_factories(self, transport_factory):
        client = TypedSearch(transport=transport_factory())

        endpoint = client.ingest.get_pipeline()

        assert isinstance(endpoint, EndpointRequest)
        assert endpoint.descriptor.name == "ingest.get_pipeline"
        assert "get_pipeline" in dir(client.ingest)
        assert {f.descriptor.name for f in client.ccr} == {
            "ccr.unfollow",
            "ccr.pause_follow",
        }

    def test_factories_return_fresh_objects(self, transport_factory):
        client = TypedSearch(transport=transport_factory())

        assert client.ingest.get_pipeline() is not client.ingest.get_pipeline()

    def test_required_parameters_positional(self, transport_factory):
        transport = transport_factory(Response(200))
        client = TypedSearch(transport=transport)

        assert client.ccr.unfollow("follower").is_success() is True
        assert client.core.delete("logs", "doc 1").refresh(True).is_success() is True

        assert [r.url for r in transport.requests] == [
            "/follower/_ccr/unfollow",
            "/logs/_doc/doc%201?refresh=true",
        ]
        assert transport.requests[1].method == "DELETE"

    def test_required_parameter_count_checked(self, transport_factory):
        client = TypedSearch(transport=transport_factory())

        with pytest.raises(TypeError, match=r"takes 2 positional argument\(s\)"):
            client.core.delete("logs")

    def test_unknown_endpoint(self, transport_factory):
        client = TypedSearch(transport=transport_factory())

        with pytest.raises(AttributeError, match="has no endpoint 'nope'"):
            client.ingest.nope

    def test_compatibility_version_from_config(
        self, monkeypatch: pytest.MonkeyPatch, transport_factory
    ):
        monkeypatch.setenv("TYPEDSEARCH_COMPATIBILITY_VERSION", "7")
        transport = transport_factory()

        TypedSearch(transport=transport).core.info().do()

        assert transport.requests[0].headers["Accept"] == (
            "application/vnd.elasticsearch+json;compatible-with=7"
        )

    def test_close_releases_built_transport(self):
        with TypedSearch(base_url="http://localhost:9200") as client:
            transport = client.transport

        assert isinstance(transport, HttpxTransport)
        assert transport._client.is_closed

    def test_close_leaves_supplied_transport_open(self, config):
        transport = HttpxTransport(config)

        with TypedSearch(transport=transport):
            pass

        assert not transport._client.is_closed
        transport.close()

    @pytest.mark.anyio
    async def test_aclose_releases_built_transport(self):
        async with TypedSearch(base_url="http://localhost:9200") as client:
            transport = client.transport
            assert not transport.async_client.is_closed

        assert transport._client.is_closed
        assert transport.async_client.is_closed

    def test_namespace_iterates_factories(self, transport_factory):
        client = TypedSearch(transport=transport_factory())

        assert [factory.descriptor.operation for factory in client.ingest] == [
            "get_pipeline",
            "put_pipeline",
            "delete_pipeline",
        ]
