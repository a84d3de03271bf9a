# api/main.py
"""
The main FastAPI application for HTS classification and trade compliance.
To run this file, navigate to your project directory in the terminal and run:
`uvicorn api.main:app --reload`
"""
import logging

from fastapi import FastAPI, Request, status # type: ignore
from fastapi.encoders import jsonable_encoder # type: ignore
from fastapi.exceptions import RequestValidationError # type: ignore
from fastapi.middleware.cors import CORSMiddleware # type: ignore
from fastapi.responses import JSONResponse # type: ignore

from api.dependencies import get_orchestrator
from api.routes.classify import CLASSIFICATION_FAILED, router as classify_router
from api.routes.reference import router as reference_router
from config.settings import configure_logging, settings

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Initialize the FastAPI application
app = FastAPI(
    title="HTS Trade Compliance API",
    description="Classifies products against the HTS reference table and derives FTA, MPF and duty facts."
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(classify_router)
app.include_router(reference_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and missing fields get the structured failure response."""
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": CLASSIFICATION_FAILED, "detail": jsonable_encoder(exc.errors())},
    )


@app.on_event("startup")
def startup_event():
    """
    Warm the reference table. A failed load leaves the table empty and
    classification falls back until a later request reloads it.
    """
    try:
        orchestrator = get_orchestrator()
        orchestrator.reference_table()
    except Exception as e:
        logger.error("Failed to warm HTS reference table at startup: %s", e)


@app.get("/health")
def health():
    return {"status": "ok"}
