import json
from typing import Annotated

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_cors_origins(raw: str) -> list[str]:
    """Parse CORS_ORIGINS as comma-separated string or JSON list."""
    if raw.startswith("["):
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # LLM enhancement (optional; local analysis is always available)
    gemini_api_key: str = ""
    llm_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.3
    llm_max_output_tokens: int = 2048
    llm_timeout_seconds: float = 20.0
    llm_max_attempts: int = 3
    llm_retry_base_delay: float = 1.0
    llm_retry_max_delay: float = 5.0
    llm_strict: bool = False  # if True, don't fall back to local analysis on LLM failure
    analysis_timeout_seconds: float = 90.0
    enhancement_min_chars: int = 100

    # Resume chunking for the enhancement calls
    chunk_size: int = 5000
    chunk_parallel: bool = True
    chunk_concurrency: int = 3
    chunk_timeout_seconds: float = 75.0

    # Input limits
    max_upload_size_mb: int = 5
    job_description_min_chars: int = 50
    job_description_max_chars: int = 5000

    rate_limit: str = "10/minute"
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return _parse_cors_origins(value)
        return value

    @field_validator(
        "llm_timeout_seconds",
        "llm_max_attempts",
        "llm_max_output_tokens",
        "analysis_timeout_seconds",
        "chunk_size",
        "chunk_concurrency",
        "chunk_timeout_seconds",
        "max_upload_size_mb",
    )
    @classmethod
    def _positive(cls, value, info):
        if value <= 0:
            raise ValueError(f"{info.field_name} must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def _check_limits(self):
        if self.job_description_min_chars > self.job_description_max_chars:
            raise ValueError("job_description_min_chars cannot exceed job_description_max_chars")
        if self.llm_retry_base_delay < 0 or self.llm_retry_max_delay < 0:
            raise ValueError("retry delays cannot be negative")
        return self

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


settings = Settings()
