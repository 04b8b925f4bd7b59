"""
Configuration management using pydantic-settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vapcore.constants import DEFAULT_TX_FEE
from vapcore.models import NetworkType


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VAP_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    network: NetworkType = NetworkType.VERUSTEST
    default_fee: int = Field(default=DEFAULT_TX_FEE, ge=0)

    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()
