from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from position_monitor.configs import MexcSettings


class ReporterSettings(BaseSettings):
    ACCESS_KEY: str = Field(min_length=1)
    SECRET_KEY: str = Field(min_length=1)
    BASE_URL: str = "https://contract.mexc.com"
    REQUEST_TIMEOUT: float = Field(default=10.0, gt=0)
    MAX_CONCURRENCY: int = Field(default=1, ge=1)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MEXC_",
        extra="ignore",
        validate_default=True,
        str_strip_whitespace=True,
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def mexc(self) -> MexcSettings:
        return MexcSettings(
            ACCESS_KEY=self.ACCESS_KEY,
            SECRET_KEY=self.SECRET_KEY,
            BASE_URL=self.BASE_URL,
            REQUEST_TIMEOUT=self.REQUEST_TIMEOUT,
        )
