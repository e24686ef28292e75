"""
Authorizer references.

Only references are resolved here; the authorizer resources themselves are
compiled elsewhere under the <Name>ApiGatewayAuthorizer naming convention.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import AuthorizerResolutionError

AUTHORIZER_SUFFIX = "ApiGatewayAuthorizer"


@dataclass(frozen=True)
class AuthorizerBinding:
    """Authorization settings of one method."""

    authorization_type: str = "NONE"
    logical_id: Optional[str] = None


def name_from_arn(arn: str) -> str:
    """
    Take the function name out of a Lambda ARN.

    The last hyphen-delimited token of the last colon-delimited segment is
    used, so "arn:aws:lambda:us-east-1:123:function:service-dev-auth" -> "auth".
    """
    return arn.split(":")[-1].split("-")[-1]


def authorizer_name(reference: Any) -> Optional[str]:
    if isinstance(reference, str):
        if ":" in reference:
            return name_from_arn(reference)
        return reference

    if isinstance(reference, Mapping):
        # Intrinsics such as {"Fn::GetAtt": ...} cannot be resolved to a name.
        arn = reference.get("arn")
        if arn:
            return name_from_arn(arn) if isinstance(arn, str) else None
        name = reference.get("name")
        if name:
            return name if isinstance(name, str) else None

    return None


def authorizer_logical_id(name: str) -> str:
    return f"{name.capitalize()}{AUTHORIZER_SUFFIX}"


def resolve_authorizer(reference: Any) -> AuthorizerBinding:
    """
    Resolve an authorizer reference (name, ARN or object).

    Raises:
        AuthorizerResolutionError: when no name can be derived
    """
    if not reference:
        return AuthorizerBinding()

    name = authorizer_name(reference)
    if not name:
        raise AuthorizerResolutionError(reference)

    return AuthorizerBinding(authorization_type="CUSTOM", logical_id=authorizer_logical_id(name))
