import json
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


def _parse_cors_origins(raw: str) -> list[str]:
    """Parse CORS_ORIGINS as a comma-separated string or a JSON list."""
    raw = raw.strip()
    if raw.startswith("["):
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Request limits enforced at the HTTP boundary
    max_upload_size_mb: int = 5
    max_resume_chars: int = 50000
    max_job_description_chars: int = 10000

    # Paging for list routes
    default_page_size: int = 10
    max_page_size: int = 100

    rate_limit: str = "30/minute"
    rate_limit_enabled: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _parse_cors_origins(value)
        return value


settings = Settings()
