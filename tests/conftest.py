"""
Pytest fixtures for the HTS classification tests.

Provides:
- Sample reference CSV text and an on-disk copy
- In-memory ReferenceTable builders
- Orchestrator and FastAPI test client wired to the sample table
"""

import os
import sys
import pytest

# Add the project root to the Python path
project_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_dir not in sys.path:
    sys.path.insert(0, project_dir)

from agents.fetch_agent import ReferenceTableLoader
from chains.hts_chain import ClassificationOrchestrator
from services.models import ReferenceTable, TariffEntry


HEADER = (
    "SKU ID,Category/Sub-category,HTS Number,Description,Country of Origin,COGS/Unit Cost,"
    "General Rate of Duty,Special Rate of Duty,Column 2 Rate of Duty,Additional Duties,"
    "Applicable FTA Countries,Applicable FTA Rules"
)

# FTA country lists hold a single code per row: the loader splits on every
# comma, so multi-code lists only survive in in-memory tables.
SAMPLE_CSV = "\n".join([
    HEADER,
    '"SKU2001","Men\'s Apparel → Shirts of cotton","6104.32","Shirts and shirt-blouses of cotton",'
    '"Vietnam","12.50","16.5%","Free (AU)","90%","","AU","US-Australia FTA; CPTPP"',
    "SKU2002,Paper → Of paper yarn,5311.00.60.00,Of paper yarn,Vietnam,72.66,2.7%,Free (KR),40%,,KR,US-Korea FTA",
    "SKU2003,Footwear → Leather,6403.99,Footwear with uppers of leather,Italy,30.00,10%,Free (SG),35%,,SG,US-Singapore FTA",
    ",Missing → code,,Row without a code,China,1.00,1%,,,,,",
    "SKU2005,Missing → description,9999.99,,China,1.00,1%,,,,,",
    "",
])


def make_entry(hts_number, description, category=None, fta_countries=None, fta_rules=None,
               general_rate="5%", special_rate=None):
    return TariffEntry(
        hts_number=hts_number,
        description=description,
        category=category,
        general_rate=general_rate,
        special_rate=special_rate,
        column2_rate="40%",
        fta_countries=fta_countries,
        fta_rules=fta_rules,
    )


class StaticLoader(ReferenceTableLoader):
    """Loader that serves a fixed table and counts loads."""

    def __init__(self, table):
        super().__init__()
        self.table = table
        self.calls = 0

    def load(self, source):
        self.calls += 1
        return self.table

    def cached(self, source):
        return self.table


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def sample_csv_path(tmp_path):
    path = tmp_path / "hts_reference.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return str(path)


@pytest.fixture
def cotton_table():
    """Several cotton rows with multi-code FTA lists."""
    return ReferenceTable(source="memory", entries=(
        make_entry("6104.32", "Shirts and shirt-blouses of cotton", "Men's Apparel → Shirts",
                   "A,AU,BH,CL,CO,D,E,IL,JO,KR,MA,OM,P,PA,PE,S,SG",
                   "CPTPP; US-Australia FTA; US-Bahrain FTA", "16.5%",
                   "Free (A,AU,BH,CL,CO,D,E,IL,JO,KR,MA,OM,P,PA,PE,S,SG)"),
        make_entry("6205.20", "Men's shirts of cotton, woven", "Men's Apparel → Woven",
                   "BH, CL ,KR", "US-Bahrain FTA; US-Chile FTA", "19.7%"),
        make_entry("5208.11", "Woven fabrics of cotton", "Textiles → Cotton fabric", "SG",
                   "US-Singapore FTA", "8.4%"),
        make_entry("6109.10", "T-shirts of cotton, knitted", "Men's Apparel → T-shirts", "MX",
                   "USMCA", "16.5%"),
        make_entry("8471.30", "Portable computers", "Electronics → Computers", "", "", "Free"),
    ))


@pytest.fixture
def sample_table(sample_csv_path):
    loader = ReferenceTableLoader()
    return loader.load(sample_csv_path)


@pytest.fixture
def orchestrator(sample_csv_path):
    return ClassificationOrchestrator(sample_csv_path, loader=ReferenceTableLoader())


@pytest.fixture
def empty_orchestrator():
    return ClassificationOrchestrator("memory", loader=StaticLoader(ReferenceTable(source="memory")))


@pytest.fixture
def client(orchestrator):
    """FastAPI test client using the sample table."""
    from fastapi.testclient import TestClient
    from api.main import app
    from api.dependencies import get_orchestrator

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()
