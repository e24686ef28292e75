"""
Custom exception classes.

Represent errors raised while compiling HTTP events into gateway resources.
"""

from typing import Iterable, Optional


class CompilationError(Exception):
    """Base exception class for method compilation."""

    pass


class ConfigurationError(CompilationError):
    """Raised when a user-supplied event declaration is invalid."""

    def __init__(self, message: str, field: Optional[str] = None, allowed: Optional[Iterable[str]] = None):
        self.field = field
        self.allowed = list(allowed) if allowed is not None else None
        super().__init__(message)


class DuplicateResourceError(ConfigurationError):
    """Raised when two declarations compile to the same logical id."""

    def __init__(self, logical_id: str):
        self.logical_id = logical_id
        super().__init__(
            f"Resource {logical_id} is declared more than once."
            " Each path and method pair may only be declared by one HTTP event.",
            field="http",
        )


class UnknownResourceError(CompilationError):
    """Raised when an external lookup has no entry for a path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No resource logical id registered for path: {path}")


class AuthorizerResolutionError(CompilationError):
    """Raised when no authorizer name can be derived from a reference."""

    def __init__(self, reference):
        self.reference = reference
        super().__init__(f"Unable to derive an authorizer name from: {reference!r}")
