from dishka import Provider, Scope, provide

from position_monitor.core.clients.interface import AbstractPositionClient
from position_monitor.reporter.config.settings import ReporterSettings
from position_monitor.reporter.services.deviation_report import DeviationReportService


class ServiceProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_deviation_report_service(
        self, client: AbstractPositionClient, config: ReporterSettings
    ) -> DeviationReportService:
        return DeviationReportService(client=client, max_concurrency=config.MAX_CONCURRENCY)
