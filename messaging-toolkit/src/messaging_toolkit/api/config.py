"""
Server settings read from environment variables.

    MESSAGING_ALLOWED_ORIGIN  front-end origin allowed by CORS (default http://localhost:4200)
    MESSAGING_HOST            bind address (default 127.0.0.1)
    MESSAGING_PORT            bind port, 1-65535 (default 8080)
    LOG_LEVEL                 log level for both loguru and uvicorn (default INFO)

Invalid values raise pydantic's 'ValidationError', a 'ValueError'.
"""

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_ALLOWED_ORIGIN = "http://localhost:4200"

# Levels known to both loguru and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")


class ServerSettings(BaseModel):
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    host: str = "127.0.0.1"
    port: int = Field(8080, ge=1, le=65535)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls.model_validate(
            {
                "allowed_origin": os.getenv("MESSAGING_ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGIN),
                "host": os.getenv("MESSAGING_HOST", "127.0.0.1"),
                "port": os.getenv("MESSAGING_PORT", "8080"),
                "log_level": os.getenv("LOG_LEVEL", "INFO"),
            }
        )
