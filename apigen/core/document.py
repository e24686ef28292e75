"""
Shared output document.

Collects compiled resources and the ordered list of method ids that the
deployment resource must depend on.
"""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import DuplicateResourceError
from ..renderer import render_document

logger = logging.getLogger(__name__)


class TemplateDocument:
    def __init__(
        self,
        resources: Optional[Dict[str, Any]] = None,
        method_dependencies: Optional[List[str]] = None,
        allow_overwrite: bool = False,
    ):
        """
        Args:
            resources: existing Resources mapping to add to (shared, mutated)
            method_dependencies: existing dependency list to append to
            allow_overwrite: let a repeated logical id replace the earlier resource
        """
        self.resources = resources if resources is not None else {}
        self.method_dependencies = method_dependencies if method_dependencies is not None else []
        self.allow_overwrite = allow_overwrite

    def add_resource(self, logical_id: str, resource: Dict[str, Any]) -> None:
        if logical_id in self.resources:
            if not self.allow_overwrite:
                raise DuplicateResourceError(logical_id)
            logger.warning(
                f"Overwriting resource {logical_id}", extra={"logical_id": logical_id}
            )
        self.resources[logical_id] = resource

    def add_method(self, logical_id: str, resource: Dict[str, Any]) -> None:
        """Add a method resource and record it for deployment ordering."""
        self.add_resource(logical_id, resource)
        # An overwritten id stays listed once, at its first position.
        if logical_id not in self.method_dependencies:
            self.method_dependencies.append(logical_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Resources": self.resources,
            "MethodDependencies": list(self.method_dependencies),
        }

    def render(self, output_format: str = "json") -> str:
        return render_document(self.to_dict(), output_format)
