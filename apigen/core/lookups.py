"""
Identifier lookups supplied by the caller.

Path resources and Lambda functions are compiled elsewhere; only their
logical ids are needed here.
"""

from dataclasses import dataclass, field
from typing import Mapping

from ..exceptions import UnknownResourceError
from .utils import resource_id_suffix, upper_first

METHOD_ID_PREFIX = "ApiGatewayMethod"


def default_function_logical_id(function_name: str) -> str:
    """hello -> HelloLambdaFunction"""
    return f"{upper_first(function_name)}LambdaFunction"


@dataclass(frozen=True)
class ResourceLookups:
    """Read-only path and function identifier lookups."""

    path_resource_ids: Mapping[str, str]
    function_logical_ids: Mapping[str, str] = field(default_factory=dict)
    resource_id_prefix: str = "ApiGatewayResource"

    def path_resource_id(self, path: str) -> str:
        try:
            return self.path_resource_ids[path]
        except KeyError:
            raise UnknownResourceError(path) from None

    def method_logical_id(self, path: str, method_suffix: str) -> str:
        """ApiGatewayMethod<ResourceIdSuffix><MethodSuffix>"""
        suffix = resource_id_suffix(self.path_resource_id(path), self.resource_id_prefix)
        return f"{METHOD_ID_PREFIX}{suffix}{method_suffix}"

    def function_logical_id(self, function_name: str) -> str:
        return self.function_logical_ids.get(
            function_name, default_function_logical_id(function_name)
        )
