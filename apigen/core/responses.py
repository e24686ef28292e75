"""
Method and integration responses.

Every method answers with the same status-code ladder. Non-200 codes are
selected by matching a bracketed tag (e.g. "[404]") in the error message
raised by the function.
"""

from collections.abc import Mapping
from typing import List, Optional, Tuple

from ..exceptions import ConfigurationError
from ..models import CorsOptions, HttpEventSpec, IntegrationResponse, MethodResponse, ResponseOptions

SUCCESS_STATUS_CODE = 200

# (status code, selection pattern), in emission order.
ERROR_STATUS_CODES = [
    (400, r".*\[400\].*"),
    (401, r".*\[401\].*"),
    (403, r".*\[403\].*"),
    (404, r".*\[404\].*"),
    (422, r".*\[422\].*"),
    (500, r".*(Process\s?exited\s?before\s?completing\s?request|\[500\]).*"),
    (502, r".*\[502\].*"),
    (504, r".*\[504\].*"),
]

ALLOW_ORIGIN_PARAMETER = "method.response.header.Access-Control-Allow-Origin"


def response_header_parameter(name: str) -> str:
    return f"method.response.header.{name}"


def parse_response_options(response) -> ResponseOptions:
    """
    Validate the `response` section of an HTTP event.

    Raises:
        ConfigurationError: non-object response or response headers
    """
    if not response:
        return ResponseOptions()

    if not isinstance(response, Mapping):
        raise ConfigurationError(
            "Response config must be provided as an object. Please check the docs for more info.",
            field="response",
        )

    headers = response.get("headers")
    if headers and not isinstance(headers, Mapping):
        raise ConfigurationError(
            "Response headers must be provided as an object. Please check the docs for more info.",
            field="response.headers",
        )

    template = response.get("template")
    return ResponseOptions(
        headers={name: str(value) for name, value in (headers or {}).items()},
        template=str(template) if template else None,
    )


def quote_origins(origins: List[str]) -> str:
    """["a", "b"] -> "'a','b'" """
    return "'" + "','".join(origins) + "'"


def build_responses(
    event: HttpEventSpec, cors: Optional[CorsOptions] = None
) -> Tuple[List[MethodResponse], List[IntegrationResponse]]:
    """
    Build the MethodResponses and IntegrationResponses of one method.

    Args:
        event: normalized event
        cors: CORS settings the event contributed, None when disabled
    """
    options = parse_response_options(event.response)

    method_parameters = {}
    integration_parameters = {}
    for name, value in options.headers.items():
        parameter = response_header_parameter(name)
        method_parameters[parameter] = parameter
        integration_parameters[parameter] = value

    response_templates = {}
    if options.template:
        response_templates["application/json"] = options.template

    if cors is not None:
        method_parameters[ALLOW_ORIGIN_PARAMETER] = ALLOW_ORIGIN_PARAMETER
        integration_parameters[ALLOW_ORIGIN_PARAMETER] = quote_origins(cors.origins)

    method_responses = [
        MethodResponse(
            status_code=SUCCESS_STATUS_CODE,
            response_models={},
            response_parameters=method_parameters,
        )
    ]
    integration_responses = [
        IntegrationResponse(
            status_code=SUCCESS_STATUS_CODE,
            response_parameters=integration_parameters,
            response_templates=response_templates,
        )
    ]

    for status_code, pattern in ERROR_STATUS_CODES:
        method_responses.append(MethodResponse(status_code=status_code))
        integration_responses.append(
            IntegrationResponse(status_code=status_code, selection_pattern=pattern)
        )

    return method_responses, integration_responses
