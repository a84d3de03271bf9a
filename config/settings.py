# config/settings.py
"""
Runtime configuration for the classification service.
Values come from environment variables (optionally loaded from a .env file).
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_REFERENCE_SOURCE = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/HTS-veXApjGVSyYAw8SvClPoLan3qiYSiV.csv"
)


class Settings:
    """
    Configuration for the HTS reference table source and fetch behaviour.
    """

    def __init__(self):
        # URL or local path of the reference CSV
        self.reference_source = os.getenv("HTS_REFERENCE_SOURCE", DEFAULT_REFERENCE_SOURCE)

        # Network fetch bounds
        self.fetch_timeout = float(os.getenv("HTS_FETCH_TIMEOUT", "30"))
        self.fetch_retries = int(os.getenv("HTS_FETCH_RETRIES", "3"))
        self.fetch_backoff = float(os.getenv("HTS_FETCH_BACKOFF", "1"))
        # Upper bound on any single retry wait (including Retry-After)
        self.fetch_max_wait = float(os.getenv("HTS_FETCH_MAX_WAIT", "30"))
        # Seconds to serve an empty table after a failed load before refetching
        self.fetch_retry_interval = float(os.getenv("HTS_FETCH_RETRY_INTERVAL", "60"))

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global configuration instance
settings = Settings()
