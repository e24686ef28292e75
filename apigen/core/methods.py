"""
Method assembly.

Combine request templates, responses and authorization into one
AWS::ApiGateway::Method resource backed by a Lambda integration.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from ..models import (
    CorsOptions,
    HttpEventSpec,
    Integration,
    MethodProperties,
    MethodResource,
    ref,
)
from .authorizers import resolve_authorizer
from .document import TemplateDocument
from .lookups import ResourceLookups
from .request_templates import build_request_templates
from .responses import build_responses

logger = logging.getLogger(__name__)

LAMBDA_INVOCATION_PATH = ":lambda:path/2015-03-31/functions/"


def lambda_invocation_uri(function_logical_id: str) -> Dict[str, Any]:
    """Fn::Join expression of the Lambda invocation ARN."""
    return {
        "Fn::Join": [
            "",
            [
                "arn:aws:apigateway:",
                ref("AWS::Region"),
                LAMBDA_INVOCATION_PATH,
                {"Fn::GetAtt": [function_logical_id, "Arn"]},
                "/invocations",
            ],
        ]
    }


class MethodAssembler:
    def __init__(
        self,
        document: TemplateDocument,
        lookups: ResourceLookups,
        rest_api_logical_id: str = "ApiGatewayRestApi",
    ):
        self.document = document
        self.lookups = lookups
        self.rest_api_logical_id = rest_api_logical_id

    def build(self, event: HttpEventSpec, cors: Optional[CorsOptions] = None) -> MethodResource:
        """Build the method resource of one event without registering it."""
        request_templates, pass_through = build_request_templates(event)
        method_responses, integration_responses = build_responses(event, cors)
        authorizer = resolve_authorizer(event.authorizer)

        properties = MethodProperties(
            authorization_type=authorizer.authorization_type,
            authorizer_id=ref(authorizer.logical_id) if authorizer.logical_id else None,
            http_method=event.http_method,
            method_responses=method_responses,
            integration=Integration(
                type="AWS",
                integration_http_method="POST",
                uri=lambda_invocation_uri(self.lookups.function_logical_id(event.function_name)),
                request_templates=request_templates,
                passthrough_behavior=pass_through,
                integration_responses=integration_responses,
            ),
            resource_id=ref(self.lookups.path_resource_id(event.path)),
            rest_api_id=ref(self.rest_api_logical_id),
            api_key_required=True if event.private else None,
        )

        return MethodResource(depends_on=authorizer.logical_id, properties=properties)

    def assemble(
        self, event: HttpEventSpec, cors: Optional[CorsOptions] = None
    ) -> Tuple[str, Dict[str, Any]]:
        """
        Build the method resource of one event and add it to the document.

        Returns:
            (logical id, resource dict)
        """
        logical_id = self.lookups.method_logical_id(event.path, event.capitalized_method)
        resource = self.build(event, cors).to_cfn()

        self.document.add_method(logical_id, resource)
        logger.debug(
            f"Compiled {event.http_method} {event.path} -> {logical_id}",
            extra={"function": event.function_name, "logical_id": logical_id},
        )
        return logical_id, resource
