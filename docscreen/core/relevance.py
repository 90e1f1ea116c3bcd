"""
Search relevance ranking for DocScreen.

Ranks stored document records against a free-text search by where the
search terms occur: title matches weigh most, then keywords, then the
abstract.
"""

from __future__ import annotations

from typing import List

from ..models.document import DocumentRecord


class RelevanceRanker:
    """Weighted term-occurrence ranking of document records."""

    TITLE_WEIGHT = 10
    KEYWORD_WEIGHT = 5
    ABSTRACT_WEIGHT = 3

    @staticmethod
    def search_terms(search: str) -> List[str]:
        return search.lower().split(' ') if search else []

    def score(self, record: DocumentRecord, search: str) -> int:
        """
        Score one record against a search string.

        Args:
            record: Document record
            search: Search string; terms are separated by single spaces

        Returns:
            Relevance score, 0 for an empty search
        """
        terms = self.search_terms(search)
        title = record.title.lower()
        keywords = [k.lower() for k in record.keywords]
        abstract = record.abstract.lower()

        score = 0
        for term in terms:
            if term in title:
                score += self.TITLE_WEIGHT
        for term in terms:
            if any(term in keyword for keyword in keywords):
                score += self.KEYWORD_WEIGHT
        for term in terms:
            if term in abstract:
                score += self.ABSTRACT_WEIGHT
        return score

    def rank(self, records: List[DocumentRecord], search: str) -> List[DocumentRecord]:
        """Sort records by descending relevance; equal scores keep their order."""
        return sorted(records, key=lambda record: self.score(record, search), reverse=True)
