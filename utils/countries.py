# utils/countries.py
"""
Country name -> FTA partner code lookup.

The codes match the ones used in the "Applicable FTA Countries" column of the
HTS reference table (e.g. "A,AU,BH,CL,...").
"""
from typing import Dict, List

FTA_COUNTRY_CODES: Dict[str, str] = {
    "Australia": "AU",
    "Bahrain": "BH",
    "Chile": "CL",
    "Colombia": "CO",
    "Israel": "IL",
    "Jordan": "JO",
    "Korea": "KR",
    "South Korea": "KR",
    "Morocco": "MA",
    "Oman": "OM",
    "Panama": "PA",
    "Peru": "PE",
    "Singapore": "SG",
    "Canada": "CA",
    "Mexico": "MX",
}

# Origin choices offered by the classification form
COUNTRY_LIST: List[str] = [
    "Bangladesh",
    "China",
    "India",
    "Vietnam",
    "Mexico",
    "Canada",
    "United States",
    "Germany",
    "Italy",
    "Turkey",
    "Thailand",
    "Indonesia",
]


def resolve_country_code(country_name: str) -> str:
    """
    Returns the FTA code for a country display name, or "" when unknown.
    An empty code never appears in an FTA country list, so unknown origins
    are never FTA eligible.
    """
    if not country_name:
        return ""
    return FTA_COUNTRY_CODES.get(country_name.strip(), "")


def list_countries() -> List[Dict[str, str]]:
    """All known origin names with their resolved code ("" if no FTA code)."""
    names = list(dict.fromkeys(COUNTRY_LIST + list(FTA_COUNTRY_CODES)))
    return [{"name": n, "code": resolve_country_code(n)} for n in sorted(names)]
