# tariff_programs/programs.py
from typing import List, Optional

# ----------------------------
# FTA program constants
# ----------------------------
GENERIC_FTA_PROGRAM = "FTA Program"
NO_PROGRAM = "None"

FTA_REQUIREMENTS: List[str] = [
    "Certificate of origin required",
    "Direct shipment required",
    "Compliance with applicable rules of origin",
]

# Merchandise Processing Fee
MPF_CITATION = "19 CFR § 24.23"
MPF_EXEMPT_REASONING = "Products eligible for FTA treatment are typically exempt from MPF"
MPF_STANDARD_REASONING = "Standard MPF applies for non-FTA eligible products"

FTA_SPECIAL_RATE = "Free (under FTA)"
FTA_ESTIMATED_DUTY = "0% (FTA eligible)"
NOT_AVAILABLE = "N/A"


# ----------------------------
# Helpers: parse reference table annotations
# ----------------------------
def split_fta_countries(countries: Optional[str]) -> List[str]:
    """'A,AU, BH' -> ['A', 'AU', 'BH']"""
    if not countries:
        return []
    return [c.strip() for c in countries.split(",")]


def split_fta_rules(rules: Optional[str]) -> List[str]:
    """'CPTPP; US-Australia FTA' -> ['CPTPP', 'US-Australia FTA']"""
    if not rules:
        return []
    return [r.strip() for r in rules.split(";")]


def primary_program(rules: Optional[str]) -> str:
    """First listed FTA program, or a generic label when none is listed."""
    programs = split_fta_rules(rules)
    return programs[0] if programs and programs[0] else GENERIC_FTA_PROGRAM
