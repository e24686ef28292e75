import pytest

from apigen.core.cors import parse_cors_options
from apigen.core.events import normalize_http_event
from apigen.core.responses import build_responses
from apigen.exceptions import ConfigurationError

LADDER = [200, 400, 401, 403, 404, 422, 500, 502, 504]


def _event(**options):
    return normalize_http_event({"method": "GET", "path": "users/list", **options}, "first")


class TestBuildResponses:
    """Tests for method and integration responses."""

    def test_default_ladder(self):
        method_responses, integration_responses = build_responses(_event())

        assert [r.status_code for r in method_responses] == LADDER
        assert [r.status_code for r in integration_responses] == LADDER

        success = integration_responses[0].to_cfn()
        assert success == {"StatusCode": 200, "ResponseParameters": {}, "ResponseTemplates": {}}
        assert method_responses[0].to_cfn() == {
            "StatusCode": 200,
            "ResponseModels": {},
            "ResponseParameters": {},
        }
        assert method_responses[1].to_cfn() == {"StatusCode": 400}

    def test_selection_patterns(self):
        _, integration_responses = build_responses(_event())
        patterns = {r.status_code: r.selection_pattern for r in integration_responses}

        assert patterns[200] is None
        assert patterns[404] == r".*\[404\].*"
        assert patterns[500] == (
            r".*(Process\s?exited\s?before\s?completing\s?request|\[500\]).*"
        )

    def test_custom_headers_only_on_success(self):
        method_responses, integration_responses = build_responses(
            _event(response={"headers": {"Cache-Control": "'max-age=120'"}})
        )

        key = "method.response.header.Cache-Control"
        assert method_responses[0].response_parameters == {key: key}
        assert integration_responses[0].response_parameters == {key: "'max-age=120'"}
        assert all(r.response_parameters is None for r in method_responses[1:])
        assert all(r.response_parameters is None for r in integration_responses[1:])
        assert [r.status_code for r in method_responses] == LADDER

    def test_custom_success_template(self):
        _, integration_responses = build_responses(
            _event(response={"template": "$input.path('$.body')"})
        )

        assert integration_responses[0].response_templates == {
            "application/json": "$input.path('$.body')"
        }

    def test_cors_allow_origin(self):
        cors = parse_cors_options({"origins": ["https://a.example", "https://b.example"]}, "GET")
        method_responses, integration_responses = build_responses(_event(), cors)

        key = "method.response.header.Access-Control-Allow-Origin"
        assert method_responses[0].response_parameters[key] == key
        assert (
            integration_responses[0].response_parameters[key]
            == "'https://a.example','https://b.example'"
        )

    def test_response_must_be_an_object(self):
        with pytest.raises(ConfigurationError, match="Response config must be provided as an object"):
            build_responses(_event(response="json"))

    def test_response_headers_must_be_an_object(self):
        with pytest.raises(ConfigurationError, match="Response headers must be provided as an object"):
            build_responses(_event(response={"headers": ["Cache-Control"]}))
