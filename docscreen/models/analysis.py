"""
Analysis result models for DocScreen.

This module defines the data structures returned by the preview and
submission flows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from .document import DocumentStatus


@dataclass
class MatchDetail:
    """
    A corpus document whose similarity exceeded the reporting threshold.

    Attributes:
        matched_document_id: Identity of the matched corpus document
        match_percentage: Similarity in percent [0, 100]
        preview: Leading characters of the matched document's text
    """
    matched_document_id: str
    match_percentage: float
    preview: str = ""

    def __post_init__(self) -> None:
        """Validate match data."""
        if not isinstance(self.match_percentage, (int, float)):
            raise ValueError("match_percentage must be a number")
        if not (0.0 <= self.match_percentage <= 100.0):
            raise ValueError("match_percentage must be between 0.0 and 100.0")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "matched_document_id": self.matched_document_id,
            "match_percentage": round(self.match_percentage, 3),
            "preview": self.preview,
        }


@dataclass
class SimilarityResult:
    """
    Outcome of comparing one text against a corpus snapshot.

    Attributes:
        score: Highest reported match percentage, 0 when nothing was reported
        details: Reported matches in corpus order
        partial: True when at least one comparison ran out of time
        skipped: Corpus document IDs that could not be compared
    """
    score: float = 0.0
    details: List[MatchDetail] = field(default_factory=list)
    partial: bool = False
    skipped: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate similarity result."""
        if not (0.0 <= self.score <= 100.0):
            raise ValueError("score must be between 0.0 and 100.0")

    def ranked_details(self) -> List[MatchDetail]:
        """Details sorted by descending match percentage."""
        return sorted(self.details, key=lambda d: d.match_percentage, reverse=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "score": round(self.score, 3),
            "details": [d.to_dict() for d in self.details],
            "partial": self.partial,
            "skipped": list(self.skipped),
        }


@dataclass
class PreviewResult:
    """
    Artifacts used to pre-fill a submission form.

    Attributes:
        keywords: Up to ten keywords, most frequent first
        abstract: Abstract candidate paragraph, empty if none was found
        summary: Extractive summary in score order
    """
    keywords: List[str] = field(default_factory=list)
    abstract: str = ""
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "keywords": list(self.keywords),
            "abstract": self.abstract,
            "summary": self.summary,
        }


@dataclass
class SubmissionOutcome:
    """
    Result of the submission flow for one persisted document.

    Attributes:
        document_id: Identity of the submitted document
        decided_status: Status the document should be stored with
        score: Similarity score [0, 100]
        details: Reported matches in corpus order
        partial: True when the similarity scan was incomplete
        error: Description of the failure that left the document pending
    """
    document_id: str
    decided_status: DocumentStatus
    score: float = 0.0
    details: List[MatchDetail] = field(default_factory=list)
    partial: bool = False
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "document_id": self.document_id,
            "decided_status": self.decided_status.value,
            "score": round(self.score, 3),
            "details": [d.to_dict() for d in self.details],
            "partial": self.partial,
            "error": self.error,
        }
