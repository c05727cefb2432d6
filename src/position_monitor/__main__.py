from position_monitor.reporter.main import run

run()
