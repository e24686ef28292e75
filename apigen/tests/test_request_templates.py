import pytest

from apigen.core.events import normalize_http_event
from apigen.core.request_templates import (
    FORM_URLENCODED_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    build_request_templates,
    default_request_templates,
)
from apigen.exceptions import ConfigurationError


def _event(**options):
    return normalize_http_event({"method": "POST", "path": "users/create", **options}, "first")


class TestDefaultRequestTemplates:
    """Tests for the built-in request templates."""

    def test_json_template_passes_body_through(self):
        template = default_request_templates()[JSON_CONTENT_TYPE]

        assert '"body": $input.json("$")' in template
        assert "#define( $body )" not in template

    def test_form_template_decodes_body(self):
        template = default_request_templates()[FORM_URLENCODED_CONTENT_TYPE]

        assert "#define( $body )" in template
        assert '"body": $body' in template
        assert "$util.urlDecode($keyVal[0])" in template

    @pytest.mark.parametrize("content_type", [JSON_CONTENT_TYPE, FORM_URLENCODED_CONTENT_TYPE])
    def test_envelope_sections(self, content_type):
        template = default_request_templates()[content_type]

        for section in ["headers", "query", "path", "identity", "stageVariables"]:
            assert f'"{section}": $loop' in template
        assert "#set( $map = $input.params().header )" in template
        assert "#set( $map = $stageVariables )" in template
        assert '"principalId": "$context.authorizer.principalId"' in template


class TestBuildRequestTemplates:
    """Tests for request template overlay and pass-through behavior."""

    def test_defaults(self):
        templates, pass_through = build_request_templates(_event())

        assert set(templates) == {JSON_CONTENT_TYPE, FORM_URLENCODED_CONTENT_TYPE}
        assert pass_through == "NEVER"

    def test_override_replaces_same_key_verbatim(self):
        custom = '{ "stage": "$context.stage" }'
        templates, _ = build_request_templates(
            _event(request={"template": {JSON_CONTENT_TYPE: custom}})
        )

        assert templates[JSON_CONTENT_TYPE] == custom
        assert templates[FORM_URLENCODED_CONTENT_TYPE] == (
            default_request_templates()[FORM_URLENCODED_CONTENT_TYPE]
        )

    def test_additional_content_type(self):
        templates, _ = build_request_templates(
            _event(request={"template": {"text/xml": "{}"}})
        )

        assert templates["text/xml"] == "{}"
        assert JSON_CONTENT_TYPE in templates
        assert FORM_URLENCODED_CONTENT_TYPE in templates

    @pytest.mark.parametrize("value", ["NEVER", "WHEN_NO_MATCH", "WHEN_NO_TEMPLATES"])
    def test_valid_pass_through(self, value):
        _, pass_through = build_request_templates(_event(request={"passThrough": value}))

        assert pass_through == value

    def test_invalid_pass_through_names_accepted_values(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_request_templates(_event(request={"passThrough": "SOMETIMES"}))

        message = str(exc_info.value)
        assert '"SOMETIMES"' in message
        assert "NEVER, WHEN_NO_MATCH, WHEN_NO_TEMPLATES" in message
        assert exc_info.value.field == "request.passThrough"
        assert exc_info.value.allowed == ["NEVER", "WHEN_NO_MATCH", "WHEN_NO_TEMPLATES"]

    def test_request_must_be_an_object(self):
        with pytest.raises(ConfigurationError, match="Request config must be provided as an object"):
            build_request_templates(_event(request="application/json"))

    def test_template_must_be_an_object(self):
        with pytest.raises(ConfigurationError, match="Template config must be provided as an object"):
            build_request_templates(_event(request={"template": "{}"}))
