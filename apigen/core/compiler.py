"""
Method compiler.

Two passes over the declared functions:
  1. every HTTP event becomes a method resource; CORS settings are
     accumulated per path along the way
  2. every path with CORS settings gets one preflight (OPTIONS) method
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..config import CompilerConfig, config as default_config
from ..exceptions import ConfigurationError
from .cors import CorsAccumulator
from .document import TemplateDocument
from .events import iter_http_events
from .lookups import ResourceLookups
from .methods import MethodAssembler
from .preflight import emit_preflight_methods

logger = logging.getLogger(__name__)


class MethodCompiler:
    def __init__(
        self,
        lookups: ResourceLookups,
        document: Optional[TemplateDocument] = None,
        config: Optional[CompilerConfig] = None,
    ):
        self.config = config or default_config
        self.lookups = lookups
        self.document = document or TemplateDocument(
            allow_overwrite=self.config.ALLOW_DUPLICATE_METHODS
        )
        self.cors = CorsAccumulator()
        self.assembler = MethodAssembler(
            self.document, lookups, rest_api_logical_id=self.config.REST_API_LOGICAL_ID
        )

    def compile_function(self, function_name: str, function_object: Mapping) -> List[str]:
        """Compile the HTTP events of one function; return the method ids."""
        if not isinstance(function_object, Mapping):
            raise ConfigurationError(
                f"Function {function_name} must be provided as an object.", field="functions"
            )

        logical_ids = []
        for event in iter_http_events(function_name, function_object):
            contribution = self.cors.add(event.path, event.http_method, event.cors)
            logical_id, _ = self.assembler.assemble(event, contribution)
            logical_ids.append(logical_id)
        return logical_ids

    def compile(self, functions: Mapping[str, Any]) -> TemplateDocument:
        """
        Compile every function, then the preflight methods.

        Args:
            functions: function name -> {"events": [...]}, in declaration order
        """
        method_count = 0
        for function_name, function_object in functions.items():
            method_count += len(self.compile_function(function_name, function_object))

        preflights = emit_preflight_methods(
            self.cors, self.document, self.lookups, self.config.REST_API_LOGICAL_ID
        )

        logger.info(
            f"Compiled {method_count} method(s) and {len(preflights)} preflight method(s)",
            extra={"methods": method_count, "preflights": len(preflights)},
        )
        return self.document


def compile_methods(
    functions: Mapping[str, Any],
    path_resource_ids: Mapping[str, str],
    function_logical_ids: Optional[Mapping[str, str]] = None,
    resources: Optional[Dict[str, Any]] = None,
    method_dependencies: Optional[List[str]] = None,
    config: Optional[CompilerConfig] = None,
) -> TemplateDocument:
    """
    Compile HTTP events into API Gateway method resources.

    Args:
        functions: function name -> {"events": [...]}
        path_resource_ids: URL path -> path resource logical id
        function_logical_ids: function name -> Lambda function logical id
            (defaults to <Name>LambdaFunction)
        resources: shared Resources mapping to add to
        method_dependencies: shared list that receives method logical ids
        config: compiler settings (defaults to the environment)

    Returns:
        The TemplateDocument holding the added resources.
    """
    config = config or default_config
    lookups = ResourceLookups(
        path_resource_ids=path_resource_ids,
        function_logical_ids=function_logical_ids or {},
        resource_id_prefix=config.RESOURCE_ID_PREFIX,
    )
    document = TemplateDocument(
        resources=resources,
        method_dependencies=method_dependencies,
        allow_overwrite=config.ALLOW_DUPLICATE_METHODS,
    )
    return MethodCompiler(lookups, document=document, config=config).compile(functions)
