"""
Main analyzer class for DocScreen.

This module provides the DocumentAnalyzer class that sequences the two
analysis flows: the preview flow used to pre-fill a submission form and
the submission flow that decides the review status of a stored document.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..models.analysis import PreviewResult, SimilarityResult, SubmissionOutcome
from ..models.document import DocumentStatus, SourceDocument
from .abstract_selector import AbstractSelector
from .corpus import CorpusProvider
from .keywords import KeywordExtractor
from .similarity import SimilarityMetric, SimilarityScorer
from .summarizer import SummaryGenerator
from .text_extractor import TextExtractor
from ..utils.config import Config
from ..utils.exceptions import get_error_context, log_exception
from ..utils.validators import InputValidator


log = logging.getLogger(__name__)

PREVIEW_UNAVAILABLE_MESSAGE = "Analysis unavailable, please fill in the fields manually"


class DocumentAnalyzer:
    """
    Main analyzer class for DocScreen.

    Failures are handled asymmetrically: the preview flow raises, while
    the submission flow never does once the boundary checks passed.
    A submission whose analysis fails is left ``pending`` so that the
    stored document survives and can be reviewed or retried.

    Attributes:
        config: Application configuration
        extractor: Text extraction engine
        keyword_extractor: Keyword ranking engine
        abstract_selector: Abstract paragraph selector
        summary_generator: Extractive summarizer
        similarity_scorer: Corpus comparison engine
    """

    def __init__(self, config: Optional[Config] = None,
                 metric: Optional[SimilarityMetric] = None) -> None:
        """
        Initialize the document analyzer.

        Args:
            config: Optional configuration object. If not provided,
                   default configuration will be used.
            metric: Optional similarity metric overriding the configured one
        """
        self.config = config or Config()
        self.extractor = TextExtractor(self.config)
        self.keyword_extractor = KeywordExtractor(self.config)
        self.abstract_selector = AbstractSelector(self.config)
        self.summary_generator = SummaryGenerator(self.config)
        self.similarity_scorer = SimilarityScorer(self.config, self.extractor, metric)
        self.rejection_threshold = float(self.config.get_analysis_config()["rejection_threshold"])
        self.max_document_bytes = int(self.config.get_processing_config()["max_document_bytes"])

        log.info("Document analyzer initialized")

    def extract_text(self, source: SourceDocument) -> str:
        """
        Extract the text of an uploaded document.

        Raises:
            UnsupportedFormatError: If the content type is not supported
            DocumentTooLargeError: If the document exceeds the size limit
            CorruptDocumentError: If the document cannot be parsed
        """
        log.info(f"Extracting text from {source.original_name or 'upload'} ({source.size} bytes)")
        return self.extractor.extract(source.raw_bytes, source.content_type)

    def preview(self, source: SourceDocument) -> PreviewResult:
        """
        Run the preview flow: keywords, abstract and summary.

        Does not access the corpus. Callers should present
        ``PREVIEW_UNAVAILABLE_MESSAGE`` on failure and let the user
        submit without the pre-filled fields.

        Args:
            source: Uploaded document

        Returns:
            PreviewResult

        Raises:
            UnsupportedFormatError: If the content type is not supported
            DocumentTooLargeError: If the document exceeds the size limit
            CorruptDocumentError: If the document cannot be parsed
        """
        text = self.extract_text(source)
        return self.analyze_text(text)

    def analyze_text(self, text: str) -> PreviewResult:
        """Derive the preview artifacts from already extracted text."""
        result = PreviewResult(
            keywords=self.keyword_extractor.extract_keywords(text),
            abstract=self.abstract_selector.select_abstract(text),
            summary=self.summary_generator.generate_summary(text),
        )
        log.info(f"Preview ready: {len(result.keywords)} keywords, "
                 f"abstract {len(result.abstract)} chars, summary {len(result.summary)} chars")
        return result

    def decide_status(self, score: float) -> DocumentStatus:
        """Reject when the similarity score exceeds the rejection threshold."""
        if score > self.rejection_threshold:
            return DocumentStatus.REJECTED
        return DocumentStatus.APPROVED

    def score_against_corpus(self, document_id, text: str, corpus: CorpusProvider) -> SimilarityResult:
        """Score extracted text against the comparable documents of a corpus."""
        comparable = corpus.list_comparable(document_id)
        return self.similarity_scorer.score_similarity(text, document_id, comparable)

    def submit(self, document_id, source: SourceDocument, corpus: CorpusProvider) -> SubmissionOutcome:
        """
        Run the submission flow for a document that is already stored.

        Args:
            document_id: Identity of the stored document
            source: The stored document's upload
            corpus: Corpus collaborator providing ``list_comparable``

        Returns:
            SubmissionOutcome; ``pending`` with ``error`` set if the analysis failed

        Raises:
            UnsupportedFormatError: If the content type is not supported
            DocumentTooLargeError: If the document exceeds the size limit
        """
        document_id = str(document_id)
        InputValidator.validate_content_type(source.content_type)
        InputValidator.validate_document_size(source.raw_bytes, self.max_document_bytes)

        try:
            text = self.extract_text(source)
            similarity = self.score_against_corpus(document_id, text, corpus)
        except Exception as e:
            log_exception(log, e, f"Analysis of document {document_id} failed, leaving it pending")
            return SubmissionOutcome(
                document_id=document_id,
                decided_status=DocumentStatus.PENDING,
                error=get_error_context(e),
            )

        status = self.decide_status(similarity.score)
        log.info(f"Document {document_id}: similarity {similarity.score:.2f}% -> {status.value}")
        return SubmissionOutcome(
            document_id=document_id,
            decided_status=status,
            score=similarity.score,
            details=similarity.details,
            partial=similarity.partial,
        )
