"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use TEMPLINE_ prefix (e.g., TEMPLINE_STRICT_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use TEMPLINE_ prefix.

    Examples:
        TEMPLINE_UNRECOGNIZED_MARKER="?? unrecognized"
        TEMPLINE_STRICT_MODE=true
        TEMPLINE_CONTEXT_FILENAME=context.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="TEMPLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Render configuration
    unrecognized_marker: str = Field(
        default="Unrecognized input",
        description="Text emitted for a line that matches none of the recognized shapes",
    )

    unsupported_message: str = Field(
        default="Unrecognized operator",
        description="Inline diagnostic rendered in place of a directive with an unsupported operator",
    )

    strict_mode: bool = Field(
        default=False,
        description="Strict mode: halt on the first malformed directive instead of skipping the line",
    )

    # I/O configuration
    context_filename: Optional[str] = Field(
        default=None,
        description="Default YAML context file (relative to inputdir) when --contextFile is not given",
    )

    output_filename: str = Field(
        default="index.html",
        description="Name of the rendered output file written to outputdir",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
