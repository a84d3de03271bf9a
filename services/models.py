# services/models.py
"""
Records passed between the loader, matcher, rules engine and orchestrator.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Header row of the reference CSV, in column order
REFERENCE_HEADERS: List[str] = [
    "SKU ID",
    "Category/Sub-category",
    "HTS Number",
    "Description",
    "Country of Origin",
    "COGS/Unit Cost",
    "General Rate of Duty",
    "Special Rate of Duty",
    "Column 2 Rate of Duty",
    "Additional Duties",
    "Applicable FTA Countries",
    "Applicable FTA Rules",
]


@dataclass(frozen=True)
class TariffEntry:
    """One row of the HTS reference table."""
    hts_number: str
    description: str
    sku_id: Optional[str] = None
    category: Optional[str] = None
    country_of_origin: Optional[str] = None
    unit_cost: Optional[str] = None
    general_rate: Optional[str] = None
    special_rate: Optional[str] = None
    column2_rate: Optional[str] = None
    additional_duties: Optional[str] = None
    fta_countries: Optional[str] = None
    fta_rules: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Optional[str]]) -> "TariffEntry":
        return cls(
            hts_number=record.get("HTS Number") or "",
            description=record.get("Description") or "",
            sku_id=record.get("SKU ID"),
            category=record.get("Category/Sub-category"),
            country_of_origin=record.get("Country of Origin"),
            unit_cost=record.get("COGS/Unit Cost"),
            general_rate=record.get("General Rate of Duty"),
            special_rate=record.get("Special Rate of Duty"),
            column2_rate=record.get("Column 2 Rate of Duty"),
            additional_duties=record.get("Additional Duties"),
            fta_countries=record.get("Applicable FTA Countries"),
            fta_rules=record.get("Applicable FTA Rules"),
        )


@dataclass(frozen=True)
class ReferenceTable:
    source: str
    entries: Tuple[TariffEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def codes(self) -> List[str]:
        return [e.hts_number for e in self.entries]


@dataclass(frozen=True)
class ClassificationCandidate:
    code: str
    description: str
    reasoning: str
    confidence: int
    general_duty_rate: Optional[str] = None
    special_duty_rate: Optional[str] = None
    column2_duty_rate: Optional[str] = None
    applicable_fta_countries: Optional[str] = None
    applicable_fta_rules: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: TariffEntry, reasoning: str, confidence: int) -> "ClassificationCandidate":
        return cls(
            code=entry.hts_number,
            description=entry.description,
            reasoning=reasoning,
            confidence=confidence,
            general_duty_rate=entry.general_rate,
            special_duty_rate=entry.special_rate,
            column2_duty_rate=entry.column2_rate,
            applicable_fta_countries=entry.fta_countries,
            applicable_fta_rules=entry.fta_rules,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "description": self.description,
            "reasoning": self.reasoning,
            "confidence": self.confidence,
            "generalDutyRate": self.general_duty_rate,
            "specialDutyRate": self.special_duty_rate,
            "column2DutyRate": self.column2_duty_rate,
            "applicableFtaCountries": self.applicable_fta_countries,
            "applicableFtaRules": self.applicable_fta_rules,
        }


@dataclass(frozen=True)
class FtaEligibility:
    eligible: bool
    program: str
    reasoning: str
    requirements: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MpfExemption:
    exempt: bool
    reasoning: str
    citation: str


@dataclass(frozen=True)
class DutyInformation:
    general_rate: str
    special_rate: str
    applicable_ftas: List[str]
    estimated_duty: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generalRate": self.general_rate,
            "specialRate": self.special_rate,
            "applicableFtas": list(self.applicable_ftas),
            "estimatedDuty": self.estimated_duty,
        }


@dataclass(frozen=True)
class ComplianceFacts:
    """Output of the rules engine for a single top candidate."""
    fta_eligibility: FtaEligibility
    mpf_exemption: MpfExemption
    duty_information: DutyInformation


@dataclass(frozen=True)
class ComplianceResult:
    hs_codes: List[ClassificationCandidate]
    fta_eligibility: FtaEligibility
    mpf_exemption: MpfExemption
    duty_information: DutyInformation
    confidence: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialises to the flat camelCase response object."""
        return {
            "hsCodes": [c.to_dict() for c in self.hs_codes],
            "ftaEligibility": asdict(self.fta_eligibility),
            "mpfExemption": asdict(self.mpf_exemption),
            "dutyInformation": self.duty_information.to_dict(),
            "confidence": self.confidence,
        }


class ClassificationRequest(BaseModel):
    """
    A product to classify. All fields are required and must be non-blank.
    """
    model_config = ConfigDict(populate_by_name=True)

    product_title: str = Field(..., alias="productTitle", description="Short product title, e.g. \"Men's Cotton T-Shirt\".")
    description: str = Field(..., description="Free-text product description.")
    country_of_origin: str = Field(..., alias="countryOfOrigin", description="Country of origin display name, e.g. \"Australia\".")

    @field_validator("product_title", "description", "country_of_origin")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value
