# mediaforge/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, AliasChoices, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediaforge.common.path.safe import resolve_root


def _comma_list(v: str | List[str] | tuple | None) -> List[str]:
    """CORS lists may come from env as "GET, POST"; blanks are dropped."""
    if v is None:
        return []
    items = v if isinstance(v, (list, tuple)) else str(v).split(",")
    return [s for s in (str(i).strip() for i in items) if s]


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return _comma_list(v)

    @field_validator("cors_allow_credentials", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class FFmpegConfig(BaseModel):
    ffmpeg_bin: str = "ffmpeg"
    ffprobe_bin: str = "ffprobe"
    probe_timeout_sec: int = Field(30, ge=1)
    health_timeout_sec: int = Field(10, ge=1)
    stderr_tail_lines: int = Field(40, ge=1, description="Lines of ffmpeg stderr kept for failure reports")


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "mediaforge"
    app_version: str = "0.1.0"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Listener --------
    host: str = "localhost"
    port: int = Field(8080, validation_alias=AliasChoices("PORT", "port"))

    # -------- Media paths --------
    # Relative request paths are joined to this directory
    base_dir: Path = Field(default_factory=Path.cwd, validation_alias=AliasChoices("BASE_DIR", "base_dir"))

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffmpeg: FFmpegConfig = FFmpegConfig()

    # -------- Client CLI --------
    client_base_url: str = "http://localhost:8080"
    client_timeout_sec: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_dir", mode="after")
    @classmethod
    def _resolve_base_dir(cls, v: Path) -> Path:
        return resolve_root(v)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from mediaforge.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
