import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logging(level: int | str = logging.INFO) -> None:
    """Send every record to stdout so report lines and diagnostics share one stream."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout, force=True)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
