from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from services.nbp_client import NBP_TABLE_A_URL


class AppSettings(BaseSettings):
    table_url: str = NBP_TABLE_A_URL
    source_encoding: str = "iso-8859-2"
    decode_errors: str = "strict"
    fetch_timeout: float = 10.0
    base_currency: str = "PLN"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="NBP_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()
