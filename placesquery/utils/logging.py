import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None):
    level = (level or os.getenv("PLACES_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # urllib3 debug lines carry the API key
    logging.getLogger("urllib3").setLevel(logging.WARNING)
