from __future__ import annotations

"""
Configuration loader for the Spartan ZKP service.

- Reads environment variables (optionally from `.env`) via pydantic-settings.
- The resulting record is frozen: it is built once at process start and handed
  to the app factory and the uvicorn launcher; nothing mutates it afterwards.

Environment variables:
    HOST              (str, default "0.0.0.0") : Bind address
    PORT              (int, default 8080)      : Bind port
    LOG_LEVEL         (str, default "INFO")    : Logging level
    LOG_FORMAT        (str, default "json")    : "json" or "console"
    PROVE_DELAY_MS    (int, default 100)       : Simulated proof generation time
    VERIFY_DELAY_MS   (int, default 50)        : Simulated verification time
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class Settings(BaseSettings):
    # Bind
    host: str = Field(DEFAULT_HOST, description="Bind address")
    port: int = Field(DEFAULT_PORT, ge=1, le=65535, description="Bind port")

    # Logging
    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_format: str = Field("json", description='Log renderer: "json" or "console"')

    # Placeholder prover timings
    prove_delay_ms: int = Field(100, ge=0, description="Artificial delay before a proof is returned")
    verify_delay_ms: int = Field(50, ge=0, description="Artificial delay before a verdict is returned")

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("host", mode="before")
    @classmethod
    def _strip_host(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or DEFAULT_HOST
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return str(v).strip().upper() if v is not None else "INFO"

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_format(cls, v):
        fmt = str(v).strip().lower() if v is not None else "json"
        if fmt not in ("json", "console"):
            raise ValueError('LOG_FORMAT must be "json" or "console"')
        return fmt

    @property
    def bind(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def prove_delay_s(self) -> float:
        return self.prove_delay_ms / 1000.0

    @property
    def verify_delay_s(self) -> float:
        return self.verify_delay_ms / 1000.0


@lru_cache(maxsize=1)
def load_config() -> Settings:
    """Return the process-wide settings, read from the environment on first call."""
    return Settings()  # type: ignore[call-arg]


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "Settings",
    "load_config",
]
