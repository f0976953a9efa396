"""Configuration management for the link shortener."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=5000,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. Each worker holds its own in-memory registry."
    )

    # Short link settings
    base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL for generating short URLs"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    short_code_length: int = Field(
        default=6,
        ge=4,
        description="Length of generated short codes"
    )

    short_code_alphabet: Literal["hex", "base62"] = Field(
        default="hex",
        description="Alphabet for generated short codes"
    )

    max_collision_retries: int = Field(
        default=1000,
        ge=1,
        description="Maximum codes drawn per creation before giving up"
    )

    recent_list_limit: int = Field(
        default=10,
        ge=0,
        description="Default number of entries returned by the listing endpoint"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
