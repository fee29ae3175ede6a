from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class AppSettings(BaseSettings):
    SMARTBLOCKS_API_URL: Optional[str] = None # Falls back to catalog_client's default
    SMARTBLOCKS_GRAPH: str = "" # Graph identity used to pick out self-published entries
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

settings = AppSettings()
