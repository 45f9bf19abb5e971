from __future__ import annotations

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "crm-gateway"
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    port: int = 3000
    app_log_level: str = "INFO"
    log_format: str = "text"  # "text" | "json"

    # Store (Supabase); the VITE_ names are shared with the frontend .env
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "vite_supabase_url"),
    )
    supabase_anon_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "supabase_anon_key", "supabase_key", "vite_supabase_anon_key"
        ),
    )
    store_timeout: float = 30.0

    # CORS
    cors_origins: list[str] = ["*"]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def store_rest_url(self) -> str:
        """Base URL of the PostgREST API exposed by the Supabase project."""
        return f"{self.supabase_url.rstrip('/')}/rest/v1"

    @model_validator(mode="after")
    def validate_production_store(self) -> Settings:
        if self.is_production:
            if not self.supabase_url:
                raise ValueError("supabase_url must be set in production")
            if not self.supabase_anon_key:
                raise ValueError("supabase_anon_key must be set in production")
        return self


settings = Settings()
