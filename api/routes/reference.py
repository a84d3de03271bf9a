from fastapi import APIRouter, Depends # type: ignore
from typing import List

from api.dependencies import get_orchestrator
from api.models import CountryOut, ReferenceStatus
from chains.hts_chain import ClassificationOrchestrator
from utils.countries import list_countries

router = APIRouter(prefix="/api", tags=["reference"])


@router.get("/reference/status", response_model=ReferenceStatus)
def reference_status(orchestrator: ClassificationOrchestrator = Depends(get_orchestrator)):
    """
    Reports whether the HTS reference table is loaded. Does not trigger a fetch.
    """
    table = orchestrator.loader.cached(orchestrator.source)
    count = len(table) if table is not None else 0
    return ReferenceStatus(source=orchestrator.source, loaded=count > 0, record_count=count)


@router.get("/countries", response_model=List[CountryOut])
def countries():
    """Origin countries with their FTA partner codes."""
    return list_countries()
