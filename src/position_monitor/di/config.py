from dishka import Provider, Scope, from_context, provide

from position_monitor.configs import MexcSettings
from position_monitor.reporter.config.settings import ReporterSettings


class ReporterConfigProvider(Provider):
    scope = Scope.APP
    config = from_context(provides=ReporterSettings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_mexc_config(self, config: ReporterSettings) -> MexcSettings:
        return config.mexc
