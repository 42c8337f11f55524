"""Main application configuration schema."""

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig

OUTPUT_FORMATS = ["json", "yaml", "table", "list"]


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: str = Field("list", description="Default output format")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
