# api/models.py
"""
Pydantic models for API response bodies.
The request body is services.models.ClassificationRequest.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class HSCodeCandidate(BaseModel):
    code: str
    description: str
    reasoning: str
    confidence: int = Field(..., ge=0, le=100)
    generalDutyRate: Optional[str] = None
    specialDutyRate: Optional[str] = None
    column2DutyRate: Optional[str] = None
    applicableFtaCountries: Optional[str] = None
    applicableFtaRules: Optional[str] = None


class FtaEligibilityOut(BaseModel):
    eligible: bool
    program: str
    reasoning: str
    requirements: List[str] = Field(default=[])


class MpfExemptionOut(BaseModel):
    exempt: bool
    reasoning: str
    citation: str


class DutyInformationOut(BaseModel):
    generalRate: str
    specialRate: str
    applicableFtas: List[str] = Field(default=[])
    estimatedDuty: str


class ClassificationResponse(BaseModel):
    """
    Response model for the classification endpoint.
    """
    hsCodes: List[HSCodeCandidate] = Field(..., description="Ranked HTS candidates, best first (1-3).")
    ftaEligibility: FtaEligibilityOut
    mpfExemption: MpfExemptionOut
    dutyInformation: DutyInformationOut
    confidence: int = Field(..., description="92 when the table matched, 75 when the fallback was used.")


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[Any] = None


class ReferenceStatus(BaseModel):
    source: str
    loaded: bool
    record_count: int


class CountryOut(BaseModel):
    name: str
    code: str = Field(..., description="FTA partner code, empty when the country has none.")
