from fastapi import APIRouter, Depends # type: ignore
from fastapi.responses import JSONResponse # type: ignore
import logging

from api.dependencies import get_orchestrator
from api.models import ClassificationResponse, ErrorResponse
from chains.hts_chain import ClassificationOrchestrator
from services.models import ClassificationRequest

router = APIRouter(prefix="/api", tags=["classify"])
logger = logging.getLogger(__name__)

CLASSIFICATION_FAILED = "Classification failed"


@router.post(
    "/classify",
    response_model=ClassificationResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Classify a product",
)
def classify_endpoint(
    request: ClassificationRequest,
    orchestrator: ClassificationOrchestrator = Depends(get_orchestrator),
):
    """
    Classify a product against the HTS reference table and derive
    FTA eligibility, MPF exemption and the duty estimate.

    - **`productTitle`**: short title (e.g. "Men's Cotton T-Shirt").
    - **`description`**: free-text description (e.g. "100% cotton, short sleeve").
    - **`countryOfOrigin`**: country name (e.g. "Australia").
    """
    try:
        result = orchestrator.classify(request)
        return ClassificationResponse(**result.to_dict())
    except Exception:
        logger.exception("Classification error")
        return JSONResponse(status_code=500, content={"error": CLASSIFICATION_FAILED})
