import asyncio
from decimal import Decimal
from typing import Any

import pytest

from position_monitor.configs import MexcSettings
from position_monitor.core.clients.dto import OpenPosition
from position_monitor.core.clients.interface import AbstractPositionClient


class MockPositionClient(AbstractPositionClient):
    """In-memory implementation of AbstractPositionClient for testing"""

    def __init__(self):
        self.positions: list[OpenPosition] = []
        self.fair_prices: dict[str, Decimal] = {}
        self.errors: dict[str, Exception] = {}
        self.delays: dict[str, float] = {}
        self.fair_price_calls: list[str] = []

    def add_position(self, symbol: str, hold_avg_price: Decimal, fair_price: Decimal | None = None):
        self.positions.append(OpenPosition(symbol=symbol, hold_avg_price=hold_avg_price))
        if fair_price is not None:
            self.fair_prices[symbol] = fair_price

    def fail_symbol(self, symbol: str, error: Exception):
        self.errors[symbol] = error

    async def get_open_positions(self) -> list[OpenPosition]:
        return list(self.positions)

    async def get_fair_price(self, symbol: str) -> Decimal:
        self.fair_price_calls.append(symbol)
        if symbol in self.delays:
            await asyncio.sleep(self.delays[symbol])
        if symbol in self.errors:
            raise self.errors[symbol]
        return self.fair_prices[symbol]


@pytest.fixture
def mock_position_client() -> MockPositionClient:
    return MockPositionClient()


@pytest.fixture
def mexc_settings() -> MexcSettings:
    return MexcSettings(ACCESS_KEY="mx0vgl-test", SECRET_KEY="secret", BASE_URL="https://contract.example.com")


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as an async context manager"""

    def __init__(self, body: str, status: int = 200, raise_error: Exception | None = None):
        self.body = body
        self.status = status
        self.raise_error = raise_error

    def raise_for_status(self) -> None:
        if self.raise_error is not None:
            raise self.raise_error

    async def json(self, *, loads: Any, content_type: str | None = "application/json") -> Any:
        return loads(self.body)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


class FakeSession:
    """Records outgoing requests and replays canned responses in order"""

    def __init__(self, *responses: FakeResponse, error: Exception | None = None):
        self.responses = list(responses)
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, headers: dict[str, str]) -> FakeResponse:
        self.calls.append({"method": method, "url": url, "headers": headers})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    async def close(self) -> None:
        self.closed = True
