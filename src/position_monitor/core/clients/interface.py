from abc import ABC, abstractmethod
from decimal import Decimal

from .dto import OpenPosition


class AbstractPositionClient(ABC):
    @abstractmethod
    async def get_open_positions(self) -> list[OpenPosition]:
        pass

    @abstractmethod
    async def get_fair_price(self, symbol: str) -> Decimal:
        pass
