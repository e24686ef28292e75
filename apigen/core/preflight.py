"""
CORS preflight methods.

One OPTIONS method per path with accumulated CORS settings, answered by a
MOCK integration without invoking any function.
"""

import logging
from typing import Dict, List

from ..models import (
    CorsOptions,
    Integration,
    IntegrationResponse,
    MethodProperties,
    MethodResource,
    MethodResponse,
    ref,
)
from .cors import CorsAccumulator
from .document import TemplateDocument
from .lookups import ResourceLookups

logger = logging.getLogger(__name__)

ALLOW_ORIGIN = "method.response.header.Access-Control-Allow-Origin"
ALLOW_HEADERS = "method.response.header.Access-Control-Allow-Headers"
ALLOW_METHODS = "method.response.header.Access-Control-Allow-Methods"


def quoted_list(values: List[str]) -> str:
    """["GET", "POST"] -> "'GET,POST'" """
    return "'" + ",".join(values) + "'"


def build_preflight_method(
    cors: CorsOptions, resource_logical_id: str, rest_api_logical_id: str
) -> MethodResource:
    integration_parameters: Dict[str, str] = {
        ALLOW_ORIGIN: quoted_list(cors.origins),
        ALLOW_HEADERS: quoted_list(cors.headers),
        ALLOW_METHODS: quoted_list(cors.methods),
    }

    return MethodResource(
        properties=MethodProperties(
            authorization_type="NONE",
            http_method="OPTIONS",
            method_responses=[
                MethodResponse(
                    status_code=200,
                    response_models={},
                    response_parameters={name: True for name in integration_parameters},
                )
            ],
            integration=Integration(
                type="MOCK",
                request_templates={"application/json": "{statusCode:200}"},
                integration_responses=[
                    IntegrationResponse(
                        status_code=200,
                        response_parameters=integration_parameters,
                        response_templates={"application/json": ""},
                    )
                ],
            ),
            resource_id=ref(resource_logical_id),
            rest_api_id=ref(rest_api_logical_id),
        )
    )


def emit_preflight_methods(
    accumulator: CorsAccumulator,
    document: TemplateDocument,
    lookups: ResourceLookups,
    rest_api_logical_id: str = "ApiGatewayRestApi",
) -> List[str]:
    """
    Add one OPTIONS method per accumulated path to the document.

    Returns:
        Logical ids of the emitted preflight methods, in path order.
    """
    emitted = []
    for path, cors in accumulator.items():
        logical_id = lookups.method_logical_id(path, "Options")
        resource = build_preflight_method(
            cors, lookups.path_resource_id(path), rest_api_logical_id
        )
        document.add_resource(logical_id, resource.to_cfn())
        emitted.append(logical_id)
        logger.debug(f"Compiled preflight for {path} -> {logical_id}", extra={"path": path})

    return emitted
