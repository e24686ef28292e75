"""
Compile input loader

Parse a compile input document (YAML or JSON) into the mappings the
compiler consumes. CloudFormation short-form tags (!Ref, !Sub, ...) are
tolerated so values copied from a template load as plain data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from .exceptions import ConfigurationError


class CfnLoader(yaml.SafeLoader):
    """YAML loader that handles CloudFormation intrinsic functions."""

    pass


def cfn_constructor(loader: yaml.Loader, node: yaml.Node) -> Any:
    """Constructor for CloudFormation tags: !Ref X -> {"Ref": X}."""
    name = node.tag.lstrip("!")
    key = "Ref" if name == "Ref" else f"Fn::{name}"
    if isinstance(node, yaml.ScalarNode):
        value = loader.construct_scalar(node)
        if name == "GetAtt":
            value = value.split(".", 1)
        return {key: value}
    elif isinstance(node, yaml.SequenceNode):
        return {key: loader.construct_sequence(node, deep=True)}
    elif isinstance(node, yaml.MappingNode):
        return {key: loader.construct_mapping(node, deep=True)}
    return ""


# Register CloudFormation tags.
for tag in ["!Ref", "!Sub", "!GetAtt", "!ImportValue", "!If", "!Join", "!Select", "!Split"]:
    yaml.add_constructor(tag, cfn_constructor, Loader=CfnLoader)


@dataclass
class CompileInput:
    functions: Dict[str, Any] = field(default_factory=dict)
    path_resource_ids: Dict[str, str] = field(default_factory=dict)
    function_logical_ids: Dict[str, str] = field(default_factory=dict)


def _mapping(data: dict, key: str) -> dict:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{key} must be provided as an object.", field=key)
    return value


def parse_compile_input(content: str) -> CompileInput:
    """
    Parse a compile input document.

    Expected shape:
        functions:
          hello:
            events:
              - http: GET hello
        resourceLogicalIds:
          hello: ApiGatewayResourceHello
        functionLogicalIds:        # optional
          hello: HelloLambdaFunction
    """
    try:
        data = yaml.load(content, Loader=CfnLoader) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Compile input is not valid YAML or JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Compile input must be an object.")

    return CompileInput(
        functions=_mapping(data, "functions"),
        path_resource_ids={
            str(path): str(logical_id)
            for path, logical_id in _mapping(data, "resourceLogicalIds").items()
        },
        function_logical_ids={
            str(name): str(logical_id)
            for name, logical_id in _mapping(data, "functionLogicalIds").items()
        },
    )
