# agents/fetch_agent.py
import logging
import threading
import time
from typing import Dict, Optional

from services.models import ReferenceTable
from utils.downloader import fetch_reference_text
from utils.exceptions import DataSourceUnavailable
from utils.preprocessing import parse_reference_csv, to_entries, usable_rows

logger = logging.getLogger(__name__)


class ReferenceTableLoader:
    """
    Loads the HTS reference table once per process and caches it by source.

    `load()` only fetches when the cached table for that source is missing or
    empty. A lock serialises the populate step, so concurrent first requests
    trigger a single fetch; afterwards the table is read-only.

    After a failed load the empty table is served for `retry_interval`
    seconds before another fetch is attempted.
    """

    def __init__(self, timeout: float = 30, max_retries: int = 3, backoff: float = 1,
                 max_wait: float = 30, retry_interval: float = 0):
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff = backoff
        self.max_wait = max_wait
        self.retry_interval = retry_interval
        self._tables: Dict[str, ReferenceTable] = {}
        self._failed_at: Dict[str, float] = {}
        self._lock = threading.Lock()
        self._clock = time.monotonic

    def cached(self, source: str) -> Optional[ReferenceTable]:
        return self._tables.get(source)

    def _retry_due(self, source: str) -> bool:
        failed_at = self._failed_at.get(source)
        return failed_at is None or self._clock() - failed_at >= self.retry_interval

    def load(self, source: str) -> ReferenceTable:
        table = self._tables.get(source)
        if table is not None and (not table.is_empty or not self._retry_due(source)):
            return table

        with self._lock:
            table = self._tables.get(source)
            if table is None or (table.is_empty and self._retry_due(source)):
                table = self._fetch(source)
                self._tables[source] = table
                if table.is_empty:
                    self._failed_at[source] = self._clock()
                else:
                    self._failed_at.pop(source, None)
            return table

    def reset(self) -> None:
        with self._lock:
            self._tables.clear()
            self._failed_at.clear()

    def _read(self, source: str):
        csv_text = fetch_reference_text(
            source, max_retries=self.max_retries, timeout=self.timeout,
            backoff=self.backoff, max_wait=self.max_wait,
        )
        try:
            df = usable_rows(parse_reference_csv(csv_text))
            if df.empty:
                raise DataSourceUnavailable(source, "no usable rows")
            return to_entries(df)
        except (ValueError, KeyError, TypeError) as e:
            raise DataSourceUnavailable(source, f"unparseable table: {e}") from e

    def _fetch(self, source: str) -> ReferenceTable:
        try:
            entries = self._read(source)
        except DataSourceUnavailable as e:
            logger.error("Failed to load HTS data: %s", e)
            return ReferenceTable(source=source)

        table = ReferenceTable(source=source, entries=entries)
        logger.info("Loaded %d HTS records from %s", len(table), source)
        return table
