from .compiler import MethodCompiler, compile_methods
from .cors import CorsAccumulator
from .document import TemplateDocument
from .lookups import ResourceLookups

__all__ = [
    "MethodCompiler",
    "compile_methods",
    "CorsAccumulator",
    "TemplateDocument",
    "ResourceLookups",
]
