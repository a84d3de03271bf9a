# agents/query_agent.py
# Matches a product title/description against the HTS reference table

from abc import ABC, abstractmethod
from typing import List

from services.models import ClassificationCandidate, ReferenceTable, TariffEntry

MAX_CANDIDATES = 3
TOP_CONFIDENCE = 95
CONFIDENCE_STEP = 10


class Matcher(ABC):
    """Ranks reference table entries for a product query."""

    @abstractmethod
    def match(self, title: str, description: str) -> List[ClassificationCandidate]:
        """Return at most three candidates, best first."""


class QueryAgent(Matcher):
    """
    Lexical containment matcher over a loaded ReferenceTable.

    A row qualifies when any of these holds (all lowercase):
      1. the query contains the full row description,
      2. the row description contains the query's first token,
      3. the row category contains the query's first token.

    Qualifying rows keep table order, are cut to the first three and scored
    95, 85, 75. A short leading word such as "the" can match many categories;
    that behaviour is kept as-is.
    """

    def __init__(self, table: ReferenceTable, max_candidates: int = MAX_CANDIDATES):
        self.table = table
        self.max_candidates = max_candidates

    @staticmethod
    def build_query(title: str, description: str) -> str:
        return f"{title} {description}".lower()

    @staticmethod
    def first_token(query: str) -> str:
        return query.split(" ")[0]

    def is_match(self, entry: TariffEntry, query: str, token: str) -> bool:
        record_desc = entry.description.lower()
        category = (entry.category or "").lower()
        return record_desc in query or token in record_desc or token in category

    def match(self, title: str, description: str) -> List[ClassificationCandidate]:
        query = self.build_query(title, description)
        token = self.first_token(query)

        candidates: List[ClassificationCandidate] = []
        for entry in self.table:
            if len(candidates) == self.max_candidates:
                break
            if not self.is_match(entry, query, token):
                continue
            rank = len(candidates)
            category = entry.category or ""
            candidates.append(
                ClassificationCandidate.from_entry(
                    entry,
                    reasoning=f'Based on product description matching "{category}" category',
                    confidence=max(TOP_CONFIDENCE - rank * CONFIDENCE_STEP, 0),
                )
            )
        return candidates
