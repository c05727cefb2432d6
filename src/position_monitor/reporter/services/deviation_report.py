import asyncio
import logging
from decimal import Decimal

from position_monitor.core.clients.dto import OpenPosition
from position_monitor.core.clients.exceptions import ExchangeRequestError
from position_monitor.core.clients.interface import AbstractPositionClient
from position_monitor.core.dto import PriceDeviation

logger = logging.getLogger(__name__)


def compute_deviation(symbol: str, fair_price: Decimal, hold_avg_price: Decimal) -> PriceDeviation | None:
    """Compare fair price against the position's average entry price.

    Returns None when both prices are exactly equal. Otherwise the difference is
    signed (fair - hold) and the percentage is relative to the hold price.
    """
    if fair_price == hold_avg_price:
        return None
    if hold_avg_price == 0:
        raise ValueError(f"hold average price for {symbol} is zero")

    difference = fair_price - hold_avg_price
    return PriceDeviation(
        symbol=symbol,
        fair_price=fair_price,
        hold_avg_price=hold_avg_price,
        difference=difference,
        percent_difference=difference / hold_avg_price * 100,
    )


def format_deviation(deviation: PriceDeviation) -> str:
    fair = f"{deviation.fair_price:.6f}"
    hold = f"{deviation.hold_avg_price:.6f}"
    amount = f"{abs(deviation.difference):.6f}"
    percent = f"{abs(deviation.percent_difference):.2f}"

    if deviation.fair_price_is_greater:
        return (
            f"For {deviation.symbol}, FairPrice ({fair}) is greater than HoldAvgPrice ({hold}) "
            f"by: {amount} ({percent}%)"
        )
    return (
        f"For {deviation.symbol}, HoldAvgPrice ({hold}) is greater than FairPrice ({fair}) "
        f"by: {amount} ({percent}%)"
    )


class DeviationReportService:
    def __init__(self, client: AbstractPositionClient, max_concurrency: int = 1) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._client = client
        self._max_concurrency = max_concurrency

    async def run(self) -> list[PriceDeviation]:
        """Report fair price deviation for every open position.

        A failure fetching the positions propagates to the caller. A failure for
        a single symbol is logged and the remaining symbols are still checked.
        """
        logger.info("Fetching open positions")
        positions = await self._client.get_open_positions()
        logger.info(f"Found {len(positions)} open positions")

        if not positions:
            return []

        if self._max_concurrency == 1:
            return await self._run_sequential(positions)
        return await self._run_concurrent(positions)

    async def _run_sequential(self, positions: list[OpenPosition]) -> list[PriceDeviation]:
        reported = []
        for position in positions:
            deviation = await self._check_position(position)
            if deviation is not None:
                self._report(deviation)
                reported.append(deviation)
        return reported

    async def _run_concurrent(self, positions: list[OpenPosition]) -> list[PriceDeviation]:
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded_check(position: OpenPosition) -> PriceDeviation | None:
            async with semaphore:
                return await self._check_position(position)

        results = await asyncio.gather(*(bounded_check(position) for position in positions))

        reported = []
        for deviation in results:
            if deviation is not None:
                self._report(deviation)
                reported.append(deviation)
        return reported

    async def _check_position(self, position: OpenPosition) -> PriceDeviation | None:
        try:
            fair_price = await self._client.get_fair_price(position.symbol)
            return compute_deviation(position.symbol, fair_price, position.hold_avg_price)
        except (ExchangeRequestError, ValueError) as e:
            logger.error(f"Error checking fair price for {position.symbol}: {e}")
            return None

    def _report(self, deviation: PriceDeviation) -> None:
        logger.info(format_deviation(deviation))
