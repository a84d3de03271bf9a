# utils/downloader.py
import time
import logging
import requests
from pathlib import Path

from utils.exceptions import DataSourceUnavailable

logger = logging.getLogger(__name__)


def get_with_retries(url: str, max_retries: int = 3, timeout: float = 30, backoff: float = 1,
                     max_wait: float = 30) -> requests.Response:
    """
    GET with bounded retries. Network errors, 429 and 503 are retried with
    exponential backoff (honouring Retry-After up to `max_wait` seconds);
    other HTTP errors raise.
    """
    for attempt in range(1, max_retries + 1):
        try:
            resp = requests.get(url, timeout=timeout)
        except requests.RequestException as e:
            wait = min(backoff, max_wait)
            logger.warning("[Attempt %d] Network error fetching %s: %s. Sleeping %ss.", attempt, url, e, wait)
            if attempt < max_retries:
                time.sleep(wait)
                backoff *= 2
            continue

        if resp.status_code == 200:
            return resp
        elif resp.status_code in (429, 503):
            retry_after = resp.headers.get("Retry-After")
            wait = int(retry_after) if retry_after and retry_after.isdigit() else backoff
            wait = min(wait, max_wait)
            logger.warning("[Attempt %d] HTTP %d from %s. Waiting %ss.", attempt, resp.status_code, url, wait)
            if attempt < max_retries:
                time.sleep(wait)
                backoff *= 2
            continue
        else:
            resp.raise_for_status()

    raise RuntimeError(f"Failed after {max_retries} attempts for {url}")


def fetch_reference_text(source: str, max_retries: int = 3, timeout: float = 30, backoff: float = 1,
                         max_wait: float = 30) -> str:
    """
    Returns the raw CSV text of the reference table.
    `source` is an http(s) URL or a local file path.
    """
    try:
        if source.lower().startswith(("http://", "https://")):
            resp = get_with_retries(
                source, max_retries=max_retries, timeout=timeout, backoff=backoff, max_wait=max_wait
            )
            return resp.text
        return Path(source).read_text(encoding="utf-8")
    except (requests.RequestException, RuntimeError, OSError, UnicodeDecodeError) as e:
        raise DataSourceUnavailable(source, str(e)) from e
