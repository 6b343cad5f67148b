from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

DEFAULT_NAMING_THEME = "Technology, Energy and Collaboration"


class Settings(BaseSettings):
    draw_duration_ms: int = 2500
    frame_interval_ms: int = 16
    display_sample_size: int = 6
    grouping_delay_ms: int = 800
    naming_provider: Literal["none", "gemini", "openai"] = "none"
    naming_timeout_sec: float = 10.0
    naming_theme: str = DEFAULT_NAMING_THEME
    naming_language: str = "Traditional Chinese"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-3-flash-preview"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    storage_path: str = "data/hr-toolbox.json"
    storage_key: str = "hr-toolbox-participants"
    log_file: str = "logs/hrtoolbox.log"

    class Config:
        env_prefix = "HR_TOOLBOX_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
