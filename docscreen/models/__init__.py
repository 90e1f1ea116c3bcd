"""
Data models for DocScreen.

This package contains the data models passed between the extraction,
analysis and scoring components.
"""

from .document import ContentType, DocumentStatus, SourceDocument, CorpusDocument, DocumentRecord
from .analysis import MatchDetail, SimilarityResult, PreviewResult, SubmissionOutcome

__all__ = [
    "ContentType",
    "DocumentStatus",
    "SourceDocument",
    "CorpusDocument",
    "DocumentRecord",
    "MatchDetail",
    "SimilarityResult",
    "PreviewResult",
    "SubmissionOutcome",
]
