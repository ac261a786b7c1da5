"""Client settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://bbbondemand.com/api/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BBB_VM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ── Customer ───────────────────────────────────────────────
    customer_id: str = ""
    api_token: str = Field(default="", repr=False)

    # ── Service ────────────────────────────────────────────────
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0  # seconds, handed to the HTTP transport

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


settings = Settings()
