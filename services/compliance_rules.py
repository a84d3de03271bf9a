# services/compliance_rules.py

from services.models import (
    ClassificationCandidate,
    ComplianceFacts,
    DutyInformation,
    FtaEligibility,
    MpfExemption,
)
from tariff_programs.programs import (
    FTA_ESTIMATED_DUTY,
    FTA_REQUIREMENTS,
    FTA_SPECIAL_RATE,
    MPF_CITATION,
    MPF_EXEMPT_REASONING,
    MPF_STANDARD_REASONING,
    NO_PROGRAM,
    NOT_AVAILABLE,
    primary_program,
    split_fta_countries,
    split_fta_rules,
)


class ComplianceRulesEngine:
    """
    Derives FTA eligibility, MPF exemption and the duty estimate for the
    top classification candidate.

    MPF exemption is tied one-to-one to FTA eligibility. Real customs rules
    treat the two separately; this engine does not.
    """

    def is_fta_eligible(self, candidate: ClassificationCandidate, country_code: str) -> bool:
        if not country_code:
            return False
        return country_code in split_fta_countries(candidate.applicable_fta_countries)

    def _fta_eligibility(self, candidate: ClassificationCandidate, eligible: bool, country_name: str) -> FtaEligibility:
        if eligible:
            return FtaEligibility(
                eligible=True,
                program=primary_program(candidate.applicable_fta_rules),
                reasoning=f"{country_name} is eligible under applicable FTA programs for this HTS code",
                requirements=list(FTA_REQUIREMENTS),
            )
        return FtaEligibility(
            eligible=False,
            program=NO_PROGRAM,
            reasoning=f"{country_name} is not covered under FTA programs for this classification",
            requirements=[],
        )

    def _mpf_exemption(self, eligible: bool) -> MpfExemption:
        return MpfExemption(
            exempt=eligible,
            reasoning=MPF_EXEMPT_REASONING if eligible else MPF_STANDARD_REASONING,
            citation=MPF_CITATION,
        )

    def _duty_information(self, candidate: ClassificationCandidate, eligible: bool) -> DutyInformation:
        general = candidate.general_duty_rate or NOT_AVAILABLE
        if eligible:
            return DutyInformation(
                general_rate=general,
                special_rate=FTA_SPECIAL_RATE,
                applicable_ftas=split_fta_rules(candidate.applicable_fta_rules),
                estimated_duty=FTA_ESTIMATED_DUTY,
            )
        return DutyInformation(
            general_rate=general,
            special_rate=candidate.special_duty_rate or NOT_AVAILABLE,
            applicable_ftas=[],
            estimated_duty=general,
        )

    def evaluate(self, candidate: ClassificationCandidate, country_code: str, country_name: str = "") -> ComplianceFacts:
        """
        Args:
            candidate: the top-ranked classification.
            country_code: resolved FTA code of the origin ("" if unknown).
            country_name: origin display name, used in the reasoning text.
        """
        eligible = self.is_fta_eligible(candidate, country_code)
        return ComplianceFacts(
            fta_eligibility=self._fta_eligibility(candidate, eligible, country_name or country_code),
            mpf_exemption=self._mpf_exemption(eligible),
            duty_information=self._duty_information(candidate, eligible),
        )
