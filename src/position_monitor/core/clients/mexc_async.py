import asyncio
import json
import logging
from decimal import Decimal
from functools import partial
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from position_monitor.configs import MexcSettings
from position_monitor.core.clients.dto import FairPriceResponse, MexcResponse, OpenPosition, OpenPositionsResponse
from position_monitor.core.clients.exceptions import (
    ExchangeApiError,
    ExchangeDecodeError,
    ExchangeTransportError,
)
from position_monitor.core.clients.interface import AbstractPositionClient
from position_monitor.core.signing import canonicalize, request_timestamp, sign

logger = logging.getLogger(__name__)

_decimal_loads = partial(json.loads, parse_float=Decimal)


class MexcAsyncClient(AbstractPositionClient):
    def __init__(self, settings: MexcSettings, session: aiohttp.ClientSession | None = None) -> None:
        self._access_key = settings.ACCESS_KEY
        self._secret_key = settings.SECRET_KEY
        self._base_url = settings.BASE_URL.rstrip("/")
        self._session = session or aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=settings.REQUEST_TIMEOUT)
        )
        self._owns_session = session is None

    def _auth_headers(self, param_string: str) -> dict[str, str]:
        """Sign a single request; every call gets its own timestamp"""
        request_time = request_timestamp()
        return {
            "ApiKey": self._access_key,
            "Request-Time": request_time,
            "Signature": sign(self._access_key, self._secret_key, request_time, param_string),
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Make authenticated request to MEXC contract API"""
        param_string = canonicalize(params or {})
        headers = self._auth_headers(param_string)
        url = f"{self._base_url}{endpoint}"
        if param_string:
            url = f"{url}?{param_string}"

        try:
            async with self._session.request(method=method, url=url, headers=headers) as response:
                response.raise_for_status()
                payload = await response.json(loads=_decimal_loads, content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ExchangeTransportError(f"{method} {endpoint} failed: {e!r}") from e
        except ValueError as e:
            raise ExchangeDecodeError(f"{method} {endpoint} returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise ExchangeDecodeError(f"{method} {endpoint} returned {type(payload).__name__}, expected object")
        try:
            envelope = MexcResponse.model_validate(payload)
        except ValidationError as e:
            raise ExchangeDecodeError(f"{method} {endpoint} returned malformed envelope: {e}") from e
        if not envelope.success:
            raise ExchangeApiError(envelope.code, envelope.message)
        return payload

    async def get_open_positions(self) -> list[OpenPosition]:
        response = await self._request(
            method="GET",
            endpoint="/api/v1/private/position/open_positions",
        )
        try:
            positions = OpenPositionsResponse.model_validate(response).data
        except ValidationError as e:
            raise ExchangeDecodeError(f"Unexpected open positions payload: {e}") from e
        logger.debug(f"Fetched {len(positions)} open positions")
        return positions

    async def get_fair_price(self, symbol: str) -> Decimal:
        """Get the venue's fair (mark) price for a contract"""
        response = await self._request(
            method="GET",
            endpoint=f"/api/v1/contract/fair_price/{quote(symbol, safe='')}",
        )
        try:
            return FairPriceResponse.model_validate(response).data.fair_price
        except ValidationError as e:
            raise ExchangeDecodeError(f"Unexpected fair price payload for {symbol}: {e}") from e

    async def close(self) -> None:
        """Close the aiohttp session if we own it"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
