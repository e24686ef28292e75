"""
Compiler configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_CONFIG_PATH = str(Path(__file__).parent / "logging.yml")


class CompilerConfig(BaseSettings):
    """
    Configuration management for the method compiler.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default=DEFAULT_LOG_CONFIG_PATH, description="Logging dictConfig YAML path"
    )
    LOG_FORMAT: Literal["json", "plain"] = Field(
        default="json", description="Console log formatter defined in the logging config"
    )

    # Template naming
    REST_API_LOGICAL_ID: str = Field(
        default="ApiGatewayRestApi", description="Logical id of the REST API resource"
    )
    RESOURCE_ID_PREFIX: str = Field(
        default="ApiGatewayResource",
        description="Prefix stripped from path resource ids to build method ids",
    )

    # Behavior
    ALLOW_DUPLICATE_METHODS: bool = Field(
        default=False, description="Let a repeated path and method overwrite the earlier one"
    )
    OUTPUT_FORMAT: Literal["json", "yaml"] = Field(default="json", description="CLI output format")

    model_config = SettingsConfigDict(
        env_prefix="APIGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


config = CompilerConfig()
