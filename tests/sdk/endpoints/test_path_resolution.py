import pytest

from typedsearch import BuildPathError, EndpointDescriptor, EndpointRequest, PathVariant
from typedsearch._endpoints import ParameterSet, resolve_path


class TestPathResolution:
    def test_no_parameters_selects_bare_variant(self, widgets: EndpointDescriptor):
        spec = EndpointRequest(widgets).build()

        assert spec.method == "GET"
        assert spec.path == "/widgets"
        assert spec.query == ""

    def test_id_selects_parameterised_variant(self, widgets: EndpointDescriptor):
        spec = EndpointRequest(widgets).id("42").build()

        assert spec.method == "GET"
        assert spec.path == "/widgets/42"

    def test_unknown_path_parameter_fails(self, widgets: EndpointDescriptor):
        endpoint = EndpointRequest(widgets).id("42").path_param("colour", "red")

        with pytest.raises(BuildPathError) as exc_info:
            endpoint.build()

        assert exc_info.value.endpoint == "test.widgets"
        assert "cannot build path for test.widgets" in str(exc_info.value)

    def test_missing_required_parameter_fails(self):
        descriptor = EndpointDescriptor(
            name="test.unfollow",
            variants=(PathVariant("POST", "/{index}/_ccr/unfollow"),),
        )

        with pytest.raises(BuildPathError):
            EndpointRequest(descriptor).build()

    def test_build_path_error_is_value_error(self, widgets: EndpointDescriptor):
        with pytest.raises(ValueError):
            EndpointRequest(widgets).path_param("other", "x").build()

    def test_setting_parameter_twice_overwrites(self, widgets: EndpointDescriptor):
        endpoint = EndpointRequest(widgets).id("1").id("2")

        assert endpoint.params.present == frozenset({"id"})
        assert endpoint.build().path == "/widgets/2"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("my widget", "/widgets/my%20widget"),
            ("../_all", "/widgets/..%2F_all"),
            ("a,b", "/widgets/a%2Cb"),
            ("q?x=1", "/widgets/q%3Fx=1"),
            ("semi;colon", "/widgets/semi%3Bcolon"),
            ("100%", "/widgets/100%25"),
            ("café", "/widgets/caf%C3%A9"),
            ("user@host:1", "/widgets/user@host:1"),
        ],
    )
    def test_path_values_are_escaped(
        self, widgets: EndpointDescriptor, value: str, expected: str
    ):
        assert EndpointRequest(widgets).id(value).build().path == expected

    def test_list_values_comma_joined_in_one_segment(self):
        from typedsearch.api.core import count

        spec = EndpointRequest(count).index(["logs-a", "logs-b"]).build()

        assert spec.path == "/logs-a%2Clogs-b/_count"

    def test_path_values_rendered_like_query_values(self):
        from typedsearch.api.core import delete

        endpoint = EndpointRequest(delete).index(("logs",)).id(7)

        assert endpoint.params.path == {"index": "logs", "id": "7"}

    def test_multiple_parameters_interpolated_in_declared_positions(self):
        descriptor = EndpointDescriptor(
            name="test.revert",
            variants=(
                PathVariant(
                    "post",
                    "/_ml/anomaly_detectors/{job_id}/model_snapshots/{snapshot_id}/_revert",
                ),
            ),
        )

        spec = (
            EndpointRequest(descriptor)
            .snapshot_id("snap/1")
            .job_id("job 7")
            .build()
        )

        assert spec.method == "POST"
        assert (
            spec.path
            == "/_ml/anomaly_detectors/job%207/model_snapshots/snap%2F1/_revert"
        )

    def test_query_appended_for_every_variant(self, widgets: EndpointDescriptor):
        bare = EndpointRequest(widgets).pretty(True).build()
        with_id = EndpointRequest(widgets).id("1").pretty(True).build()

        assert bare.url == "/widgets?pretty=true"
        assert with_id.url == "/widgets/1?pretty=true"

    def test_resolve_path_returns_method_path_and_query(
        self, widgets: EndpointDescriptor
    ):
        params = ParameterSet(path={"id": "7"}, query={"b": "2", "a": "1 2"})

        assert resolve_path(widgets, params) == ("GET", "/widgets/7", "a=1+2&b=2")

    def test_resolution_reflects_mutation_after_build(
        self, widgets: EndpointDescriptor
    ):
        endpoint = EndpointRequest(widgets)
        first = endpoint.build()
        second = endpoint.id("9").build()

        assert first.path == "/widgets"
        assert second.path == "/widgets/9"
        assert first is not second
