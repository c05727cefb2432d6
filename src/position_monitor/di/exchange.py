from collections.abc import AsyncIterator

import aiohttp
from dishka import Scope
from dishka.provider import Provider, provide

from position_monitor.configs import MexcSettings
from position_monitor.core.clients.interface import AbstractPositionClient
from position_monitor.core.clients.mexc_async import MexcAsyncClient


class HttpClientProvider(Provider):
    @provide(scope=Scope.APP, provides=aiohttp.ClientSession)
    async def create_http_session(self, cfg: MexcSettings) -> AsyncIterator[aiohttp.ClientSession]:
        session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=cfg.REQUEST_TIMEOUT))
        yield session
        if not session.closed:
            await session.close()


class ExchangeProvider(Provider):
    @provide(scope=Scope.APP)
    async def create_position_client(
        self,
        cfg: MexcSettings,
        session: aiohttp.ClientSession,
    ) -> AsyncIterator[AbstractPositionClient]:
        client = MexcAsyncClient(settings=cfg, session=session)
        yield client
        await client.close()
