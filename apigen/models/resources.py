"""
CloudFormation resource models for AWS::ApiGateway::Method.

Field aliases carry the CloudFormation property names.
Use to_cfn() (model_dump(by_alias=True, exclude_none=True)) to convert to a dict.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


def ref(logical_id: str) -> Dict[str, str]:
    """CloudFormation {"Ref": ...} intrinsic."""
    return {"Ref": logical_id}


class CfnModel(BaseModel):
    """Base for models serialized with CloudFormation property names."""

    model_config = ConfigDict(populate_by_name=True)

    def to_cfn(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class MethodResponse(CfnModel):
    status_code: int = Field(alias="StatusCode")
    response_models: Optional[Dict[str, str]] = Field(None, alias="ResponseModels")
    response_parameters: Optional[Dict[str, Union[bool, str]]] = Field(
        None, alias="ResponseParameters"
    )


class IntegrationResponse(CfnModel):
    status_code: int = Field(alias="StatusCode")
    selection_pattern: Optional[str] = Field(None, alias="SelectionPattern")
    response_parameters: Optional[Dict[str, str]] = Field(None, alias="ResponseParameters")
    response_templates: Optional[Dict[str, str]] = Field(None, alias="ResponseTemplates")


class Integration(CfnModel):
    type: str = Field(alias="Type")
    integration_http_method: Optional[str] = Field(None, alias="IntegrationHttpMethod")
    uri: Optional[Dict[str, Any]] = Field(None, alias="Uri")
    request_templates: Dict[str, str] = Field(default_factory=dict, alias="RequestTemplates")
    passthrough_behavior: Optional[str] = Field(None, alias="PassthroughBehavior")
    integration_responses: List[IntegrationResponse] = Field(
        default_factory=list, alias="IntegrationResponses"
    )


class MethodProperties(CfnModel):
    authorization_type: str = Field("NONE", alias="AuthorizationType")
    authorizer_id: Optional[Dict[str, str]] = Field(None, alias="AuthorizerId")
    http_method: str = Field(alias="HttpMethod")
    method_responses: List[MethodResponse] = Field(default_factory=list, alias="MethodResponses")
    request_parameters: Dict[str, Any] = Field(default_factory=dict, alias="RequestParameters")
    integration: Integration = Field(alias="Integration")
    resource_id: Dict[str, str] = Field(alias="ResourceId")
    rest_api_id: Dict[str, str] = Field(alias="RestApiId")
    api_key_required: Optional[bool] = Field(None, alias="ApiKeyRequired")


class MethodResource(CfnModel):
    """AWS::ApiGateway::Method resource."""

    type: str = Field("AWS::ApiGateway::Method", alias="Type")
    depends_on: Optional[str] = Field(None, alias="DependsOn")
    properties: MethodProperties = Field(alias="Properties")
