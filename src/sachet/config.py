"""Application configuration and settings management."""

from typing import Annotated, Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .models.domain import SegmentationConfig


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="SACHET_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Sachet Water Distribution API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level applied at startup.")
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase key used for customer reads and inserts.",
    )
    customers_table: str = Field(default="customers", description="Supabase table holding customer records.")

    # Gemini configuration
    gemini_api_key: Optional[str] = Field(default=None, description="Google Gemini API key.")
    gemini_model: str = Field(default="gemini-2.5-flash")

    # Segmentation
    hq_latitude: float = Field(default=5.6037, description="Latitude of the headquarters reference point.")
    hq_longitude: float = Field(default=-0.1870, description="Longitude of the headquarters reference point.")
    hq_label: str = Field(default="Accra HQ")
    high_volume_threshold: int = Field(default=50, ge=0, description="Weekly bags above which a customer is high volume.")
    local_radius_km: float = Field(default=5.0, ge=0.0)
    new_customer_window_days: int = Field(default=30, ge=0)
    top_customers_limit: int = Field(default=5, ge=1)
    display_name_length: int = Field(default=10, ge=1)

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    def segmentation_config(self) -> SegmentationConfig:
        return SegmentationConfig(
            hq_latitude=self.hq_latitude,
            hq_longitude=self.hq_longitude,
            hq_label=self.hq_label,
            high_volume_threshold=self.high_volume_threshold,
            local_radius_km=self.local_radius_km,
            new_customer_window_days=self.new_customer_window_days,
        )


settings = Settings()
