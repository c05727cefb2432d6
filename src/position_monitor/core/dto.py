import dataclasses
from decimal import Decimal


@dataclasses.dataclass(frozen=True)
class PriceDeviation:
    symbol: str
    fair_price: Decimal
    hold_avg_price: Decimal
    difference: Decimal  # fair_price - hold_avg_price
    percent_difference: Decimal

    @property
    def fair_price_is_greater(self) -> bool:
        return self.difference > 0
