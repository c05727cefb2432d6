from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class MexcResponse(BaseModel):
    success: bool = True
    code: int = 0
    message: str | None = None


class OpenPosition(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    symbol: str
    hold_avg_price: Decimal = Field(alias="holdAvgPrice")


class OpenPositionsResponse(MexcResponse):
    data: list[OpenPosition]


class FairPrice(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    symbol: str | None = None
    fair_price: Decimal = Field(alias="fairPrice")
    timestamp: int | None = None


class FairPriceResponse(MexcResponse):
    data: FairPrice
