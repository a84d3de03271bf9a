# api/dependencies.py
"""
Dependencies for the FastAPI application.
This module owns the process-wide ClassificationOrchestrator.
"""
import logging
import threading
from typing import Optional

from agents.fetch_agent import ReferenceTableLoader
from chains.hts_chain import ClassificationOrchestrator
from config.settings import settings

logger = logging.getLogger(__name__)

# Shared instance so the reference table is loaded once per process
hts_orchestrator: Optional[ClassificationOrchestrator] = None
_orchestrator_lock = threading.Lock()


def get_orchestrator() -> ClassificationOrchestrator:
    """
    Initializes or returns the cached ClassificationOrchestrator.
    """
    global hts_orchestrator
    if hts_orchestrator is not None:
        return hts_orchestrator

    with _orchestrator_lock:
        if hts_orchestrator is None:
            loader = ReferenceTableLoader(
                timeout=settings.fetch_timeout,
                max_retries=settings.fetch_retries,
                backoff=settings.fetch_backoff,
                max_wait=settings.fetch_max_wait,
                retry_interval=settings.fetch_retry_interval,
            )
            hts_orchestrator = ClassificationOrchestrator(settings.reference_source, loader=loader)
            logger.info("ClassificationOrchestrator initialized for %s", settings.reference_source)
        return hts_orchestrator
