# livehls/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProbeConfig(BaseModel):
    bin: str = "yt-dlp"
    timeout_sec: float = Field(60.0, gt=0, description="Upper bound for a single yt-dlp run")
    format: str = "best"
    extra_args: str = ""  # shell-style, e.g. "--cookies /data/cookies.txt"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "livehls"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- HTTP --------
    host: str = "0.0.0.0"
    port: int = 8000

    # -------- Sub-configs --------
    probe: ProbeConfig = ProbeConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from livehls.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
