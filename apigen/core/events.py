"""
HTTP event normalization.

Turns the object form or the "METHOD path" shorthand of an `http` event into
an HttpEventSpec.
"""

from typing import Any, Iterator, Mapping

from ..exceptions import ConfigurationError
from ..models import HttpEventSpec

SYNTAX_HINT = (
    " The correct syntax is: http: get users/list"
    ' OR an object with "path" and "method" properties.'
    " Please check the docs for more info."
)


def normalize_http_event(raw: Any, function_name: str) -> HttpEventSpec:
    """
    Normalize one `http` event declaration.

    Args:
        raw: the value of the event's `http` key (mapping or string)
        function_name: name of the declaring function, used in messages

    Raises:
        ConfigurationError: when the declaration is neither form
    """
    if isinstance(raw, Mapping):
        method = raw.get("method")
        path = raw.get("path")
        if not isinstance(method, str) or not method or not isinstance(path, str) or not path:
            raise ConfigurationError(
                f"HTTP event of function {function_name} must define both"
                ' "path" and "method" as strings.' + SYNTAX_HINT,
                field="http",
            )
        return HttpEventSpec(
            function_name=function_name,
            method=method,
            path=path,
            request=raw.get("request"),
            response=raw.get("response"),
            cors=raw.get("cors"),
            authorizer=raw.get("authorizer"),
            private=bool(raw.get("private", False)),
        )

    if isinstance(raw, str):
        parts = raw.strip().split(None, 1)
        if len(parts) != 2:
            raise ConfigurationError(
                f'HTTP event "{raw}" of function {function_name} must contain'
                " a method and a path." + SYNTAX_HINT,
                field="http",
            )
        method, path = parts
        return HttpEventSpec(function_name=function_name, method=method, path=path.strip())

    raise ConfigurationError(
        f"HTTP event of function {function_name} is not an object nor a string." + SYNTAX_HINT,
        field="http",
    )


def iter_http_events(function_name: str, function_object: Mapping) -> Iterator[HttpEventSpec]:
    """Yield the normalized HTTP events of one function in declaration order."""
    events = function_object.get("events") or []
    if not isinstance(events, list):
        raise ConfigurationError(
            f"Events of function {function_name} must be provided as a list.",
            field="events",
        )

    for event in events:
        # Only handle http events; other triggers (schedule, s3, ...) belong elsewhere.
        if isinstance(event, Mapping) and "http" in event:
            yield normalize_http_event(event["http"], function_name)
