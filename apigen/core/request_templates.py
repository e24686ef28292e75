"""
Integration request templates.

Overlay user templates on the two built-in defaults and validate the
pass-through behavior.
"""

from collections.abc import Mapping
from typing import Dict, Tuple

from ..exceptions import ConfigurationError
from ..models import PASS_THROUGH_BEHAVIORS, HttpEventSpec, RequestOptions
from ..renderer import render_request_template

JSON_CONTENT_TYPE = "application/json"
FORM_URLENCODED_CONTENT_TYPE = "application/x-www-form-urlencoded"


def default_request_templates() -> Dict[str, str]:
    return {
        JSON_CONTENT_TYPE: render_request_template(form_urlencoded=False),
        FORM_URLENCODED_CONTENT_TYPE: render_request_template(form_urlencoded=True),
    }


def parse_request_options(request) -> RequestOptions:
    """
    Validate the `request` section of an HTTP event.

    Raises:
        ConfigurationError: non-object request or template, unknown passThrough
    """
    if not request:
        return RequestOptions()

    if not isinstance(request, Mapping):
        raise ConfigurationError(
            "Request config must be provided as an object. Please check the docs for more info.",
            field="request",
        )

    templates = request.get("template")
    if templates and not isinstance(templates, Mapping):
        raise ConfigurationError(
            "Template config must be provided as an object. Please check the docs for more info.",
            field="request.template",
        )

    pass_through = request.get("passThrough")
    if pass_through and pass_through not in PASS_THROUGH_BEHAVIORS:
        raise ConfigurationError(
            f'Request passThrough "{pass_through}" is not one of '
            + ", ".join(PASS_THROUGH_BEHAVIORS),
            field="request.passThrough",
            allowed=PASS_THROUGH_BEHAVIORS,
        )

    return RequestOptions(
        pass_through=pass_through or "NEVER",
        templates={key: str(value) for key, value in (templates or {}).items()},
    )


def build_request_templates(event: HttpEventSpec) -> Tuple[Dict[str, str], str]:
    """
    Build the RequestTemplates map and PassthroughBehavior of one method.

    Returns:
        (content-type -> template body, pass-through behavior)
    """
    options = parse_request_options(event.request)

    templates = default_request_templates()
    # Key-wise replace; defaults survive unless the same content type is given.
    templates.update(options.templates)

    return templates, options.pass_through
