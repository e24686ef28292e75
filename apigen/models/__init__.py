"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .events import (
    PASS_THROUGH_BEHAVIORS,
    CorsOptions,
    HttpEventSpec,
    RequestOptions,
    ResponseOptions,
)
from .resources import (
    Integration,
    IntegrationResponse,
    MethodProperties,
    MethodResource,
    MethodResponse,
    ref,
)

__all__ = [
    "PASS_THROUGH_BEHAVIORS",
    "CorsOptions",
    "HttpEventSpec",
    "RequestOptions",
    "ResponseOptions",
    "Integration",
    "IntegrationResponse",
    "MethodProperties",
    "MethodResource",
    "MethodResponse",
    "ref",
]
