"""
CORS accumulation.

Every HTTP event on a path may contribute CORS settings; they are merged into
one configuration per path, later consumed by the preflight emitter.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional, Tuple

from ..exceptions import ConfigurationError
from ..models import CorsOptions
from .utils import deep_merge, ordered_union

logger = logging.getLogger(__name__)

DEFAULT_CORS_HEADERS = [
    "Content-Type",
    "X-Amz-Date",
    "Authorization",
    "X-Api-Key",
    "X-Amz-Security-Token",
]


def parse_cors_options(declaration, http_method: str) -> Optional[CorsOptions]:
    """
    Build the CORS settings one event contributes.

    Args:
        declaration: the event's `cors` value (True, falsy, or object)
        http_method: upper-case method of the event

    Returns:
        CorsOptions, or None when CORS is not enabled
    """
    # An empty object still enables CORS with the defaults.
    if not isinstance(declaration, Mapping) and not declaration:
        return None

    methods = ordered_union(["OPTIONS", http_method])

    if not isinstance(declaration, Mapping):
        return CorsOptions(
            origins=["*"],
            methods=methods,
            headers=list(DEFAULT_CORS_HEADERS),
        )

    headers = declaration.get("headers")
    if headers is not None:
        if not isinstance(headers, list):
            raise ConfigurationError(
                "CORS header values must be provided as an array."
                " Please check the docs for more info.",
                field="cors.headers",
            )
    else:
        headers = list(DEFAULT_CORS_HEADERS)

    origins = declaration.get("origins")
    if origins is None:
        origins = ["*"]
    elif not isinstance(origins, list):
        raise ConfigurationError(
            "CORS origin values must be provided as an array."
            " Please check the docs for more info.",
            field="cors.origins",
        )

    # Declared methods are ignored; the event's own method is what it allows.
    return CorsOptions(
        origins=[str(origin) for origin in origins],
        methods=methods,
        headers=[str(header) for header in headers],
    )


class CorsAccumulator:
    """
    Per-path CORS state, in first-declaration order of the paths.
    """

    def __init__(self):
        self._configs: Dict[str, CorsOptions] = {}
        self._paths: List[str] = []

    def add(self, path: str, http_method: str, declaration) -> Optional[CorsOptions]:
        """
        Merge one event's CORS declaration into the state of its path.

        Returns:
            The settings this event contributed (None when CORS is off).
        """
        contribution = parse_cors_options(declaration, http_method)
        if contribution is None:
            return None

        prior = self._configs.get(path)
        if prior is None:
            self._paths.append(path)
            self._configs[path] = contribution.model_copy(deep=True)
        else:
            merged = deep_merge(prior.model_dump(), contribution.model_dump())
            merged["methods"] = ordered_union(prior.methods, contribution.methods)
            self._configs[path] = CorsOptions(**merged)

        logger.debug(
            f"CORS for {path} now allows {','.join(self._configs[path].methods)}",
            extra={"path": path, "method": http_method},
        )
        return contribution

    def get(self, path: str) -> Optional[CorsOptions]:
        return self._configs.get(path)

    def items(self) -> Iterator[Tuple[str, CorsOptions]]:
        for path in self._paths:
            yield path, self._configs[path]

    def __contains__(self, path: str) -> bool:
        return path in self._configs

    def __len__(self) -> int:
        return len(self._paths)
