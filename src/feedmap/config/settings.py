"""Configuration management using pydantic-settings.

Supports environment variables and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration.

    Every value can be overridden with a ``FEEDMAP_`` prefixed environment variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="feedmap_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # XML reading
    xml_encoding: str = Field(
        default="utf-8",
        description="Encoding used to decode byte input",
    )
    read_chunk_size: int = Field(
        default=8192,
        ge=1,
        description="Characters (or bytes) pulled from the input per refill",
    )
    expand_empty_elements: bool = Field(
        default=True,
        description="Report self-closing tags as a start event followed by an end event",
    )
    check_end_names: bool = Field(
        default=True,
        description="Reject end tags that do not match the open element",
    )


# Global singleton instance
settings = Settings()
