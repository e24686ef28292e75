import copy
import re
from typing import Any


def deep_merge(base: Any, override: Any) -> Any:
    """
    Merge `override` into a copy of `base`.

    Mappings merge key-wise and lists merge index-wise, recursively;
    any other value in `override` replaces the one in `base`.
    Neither argument is mutated.
    """
    if isinstance(base, dict) and isinstance(override, dict):
        merged = copy.deepcopy(base)
        for key, value in override.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged

    if isinstance(base, list) and isinstance(override, list):
        merged = copy.deepcopy(base)
        for index, value in enumerate(override):
            if index < len(merged):
                merged[index] = deep_merge(merged[index], value)
            else:
                merged.append(copy.deepcopy(value))
        return merged

    return copy.deepcopy(override)


def ordered_union(*sequences) -> list:
    """Concatenate sequences, dropping repeats and keeping first occurrences."""
    result = []
    for sequence in sequences:
        for item in sequence:
            if item not in result:
                result.append(item)
    return result


def upper_first(name: str) -> str:
    """Upper-case only the first character (helloWorld -> HelloWorld)."""
    return name[:1].upper() + name[1:]


def resource_id_suffix(resource_logical_id: str, prefix: str = "ApiGatewayResource") -> str:
    """
    Extract the part of a path resource logical id after its prefix.

    Example: "ApiGatewayResourceUsersList" -> "UsersList"
    """
    match = re.search(f"{re.escape(prefix)}(.*)", resource_logical_id)
    if match:
        return match.group(1)
    return resource_logical_id
