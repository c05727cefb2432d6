import asyncio
import logging
import sys

from dishka.async_container import make_async_container
from pydantic import ValidationError

from position_monitor.core.clients.exceptions import ExchangeRequestError
from position_monitor.di.config import ReporterConfigProvider
from position_monitor.di.exchange import ExchangeProvider, HttpClientProvider
from position_monitor.di.service import ServiceProvider
from position_monitor.logger import init_logging
from position_monitor.reporter.config.settings import ReporterSettings
from position_monitor.reporter.services.deviation_report import DeviationReportService

logger = logging.getLogger(__name__)


async def main() -> int:
    init_logging()

    try:
        settings = ReporterSettings()
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        return 1
    logging.getLogger().setLevel(settings.LOG_LEVEL)

    container = make_async_container(
        ReporterConfigProvider(),
        HttpClientProvider(),
        ExchangeProvider(),
        ServiceProvider(),
        context={ReporterSettings: settings},
    )
    try:
        async with container() as request_container:
            report_service = await request_container.get(DeviationReportService)
            try:
                await report_service.run()
            except ExchangeRequestError as e:
                logger.error(f"Error fetching open positions: {e}")
                return 1
    finally:
        await container.close()
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
