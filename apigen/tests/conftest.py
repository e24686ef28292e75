import pytest

from apigen.config import CompilerConfig
from apigen.core import ResourceLookups, TemplateDocument


@pytest.fixture
def compiler_config():
    """Settings independent of the caller's environment."""
    return CompilerConfig(
        REST_API_LOGICAL_ID="ApiGatewayRestApi",
        RESOURCE_ID_PREFIX="ApiGatewayResource",
        ALLOW_DUPLICATE_METHODS=False,
        OUTPUT_FORMAT="json",
    )


@pytest.fixture
def path_resource_ids():
    return {
        "users/list": "ApiGatewayResourceUsersList",
        "users/create": "ApiGatewayResourceUsersCreate",
        "items": "ApiGatewayResourceItems",
    }


@pytest.fixture
def lookups(path_resource_ids):
    return ResourceLookups(path_resource_ids=path_resource_ids)


@pytest.fixture
def document():
    return TemplateDocument()
