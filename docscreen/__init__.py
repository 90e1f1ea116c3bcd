"""
DocScreen - analysis pipeline for submitted academic documents.

This package extracts text from PDF and DOCX uploads, derives keywords,
an abstract candidate and an extractive summary for form pre-filling,
and screens submissions for lexical similarity against a corpus of
approved documents.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"

from .core.analyzer import DocumentAnalyzer
from .core.corpus import InMemoryCorpus, DirectoryCorpus
from .models.document import ContentType, DocumentStatus, SourceDocument, CorpusDocument
from .models.analysis import PreviewResult, SimilarityResult, SubmissionOutcome, MatchDetail

__all__ = [
    "DocumentAnalyzer",
    "InMemoryCorpus",
    "DirectoryCorpus",
    "ContentType",
    "DocumentStatus",
    "SourceDocument",
    "CorpusDocument",
    "PreviewResult",
    "SimilarityResult",
    "SubmissionOutcome",
    "MatchDetail",
]
