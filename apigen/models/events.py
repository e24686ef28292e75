"""
HTTP event domain models.

Canonical forms of one function's HTTP trigger declaration after normalization.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

PASS_THROUGH_BEHAVIORS = ("NEVER", "WHEN_NO_MATCH", "WHEN_NO_TEMPLATES")

PassThroughBehavior = Literal["NEVER", "WHEN_NO_MATCH", "WHEN_NO_TEMPLATES"]


class HttpEventSpec(BaseModel):
    """
    Normalized HTTP event.

    The optional sections are kept as declared; each builder validates
    the section it consumes.
    """

    function_name: str
    method: str
    path: str
    request: Any = None
    response: Any = None
    cors: Any = None
    authorizer: Any = None
    private: bool = False

    @property
    def http_method(self) -> str:
        """Upper-case method for the HttpMethod field (e.g. GET)."""
        return self.method.upper()

    @property
    def capitalized_method(self) -> str:
        """Capitalized method for logical ids (e.g. Get)."""
        return self.method.capitalize()


class RequestOptions(BaseModel):
    """Integration request shaping."""

    pass_through: PassThroughBehavior = "NEVER"
    templates: Dict[str, str] = Field(default_factory=dict)


class ResponseOptions(BaseModel):
    """Custom response headers and success template."""

    headers: Dict[str, str] = Field(default_factory=dict)
    template: Optional[str] = None


class CorsOptions(BaseModel):
    """CORS settings contributed by one event, or accumulated for one path."""

    origins: List[str] = Field(default_factory=lambda: ["*"])
    methods: List[str] = Field(default_factory=list)
    headers: List[str] = Field(default_factory=list)
