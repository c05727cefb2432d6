from pydantic import BaseModel, ConfigDict, Field


class MexcSettings(BaseModel):
    ACCESS_KEY: str = Field(min_length=1)
    SECRET_KEY: str = Field(min_length=1)
    BASE_URL: str = "https://contract.mexc.com"
    REQUEST_TIMEOUT: float = Field(default=10.0, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
