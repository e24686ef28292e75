"""
apigen: compile serverless HTTP events into API Gateway method resources.
"""

from .core import MethodCompiler, ResourceLookups, TemplateDocument, compile_methods
from .exceptions import CompilationError, ConfigurationError

__all__ = [
    "MethodCompiler",
    "ResourceLookups",
    "TemplateDocument",
    "compile_methods",
    "CompilationError",
    "ConfigurationError",
]
