"""
Lexical similarity scoring for DocScreen.

This module compares a candidate text against every comparable corpus
document and reports the best matches. The similarity heuristic itself
sits behind the ``SimilarityMetric`` interface so it can be replaced
without touching the scorer or the analyzer.
"""

from __future__ import annotations

import logging
import re
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..models.analysis import MatchDetail, SimilarityResult
from ..models.document import CorpusDocument
from ..utils.config import Config, Settings
from ..utils.exceptions import (
    ConfigurationError,
    ComparisonExtractionError,
    get_error_context,
    log_exception,
)
from .text_extractor import TextExtractor


log = logging.getLogger(__name__)

SimilarityMetric = Callable[[str, str], float]

WHITESPACE_PATTERN = re.compile(r'\s+')
TOKEN_PATTERN = re.compile(r'[a-z0-9]+')


class DiceBigramMetric:
    """
    Sørensen-Dice coefficient over character bigrams.

    Whitespace is ignored. Identical strings score 1.0, strings sharing
    no bigram score 0.0. Each bigram of the second string consumes at
    most one matching occurrence from the first.
    """

    name = "dice"

    def __call__(self, first: str, second: str) -> float:
        first = WHITESPACE_PATTERN.sub('', first or '')
        second = WHITESPACE_PATTERN.sub('', second or '')

        if first == second:
            return 1.0
        if len(first) < 2 or len(second) < 2:
            return 0.0

        first_bigrams = Counter(first[i:i + 2] for i in range(len(first) - 1))
        intersection = 0
        for i in range(len(second) - 1):
            bigram = second[i:i + 2]
            if first_bigrams[bigram] > 0:
                first_bigrams[bigram] -= 1
                intersection += 1

        return (2.0 * intersection) / (len(first) + len(second) - 2)


class TokenCosineMetric:
    """
    Cosine similarity of term frequency vectors.

    A word-level alternative to the bigram metric: insensitive to word
    order, sensitive to vocabulary overlap.
    """

    name = "cosine"

    def __call__(self, first: str, second: str) -> float:
        tokens1 = Counter(TOKEN_PATTERN.findall((first or '').lower()))
        tokens2 = Counter(TOKEN_PATTERN.findall((second or '').lower()))
        if not tokens1 or not tokens2:
            return 1.0 if tokens1 == tokens2 else 0.0

        vocabulary = list(tokens1.keys() | tokens2.keys())
        vec1 = np.array([tokens1[t] for t in vocabulary], dtype=float)
        vec2 = np.array([tokens2[t] for t in vocabulary], dtype=float)

        magnitude = np.linalg.norm(vec1) * np.linalg.norm(vec2)
        if magnitude == 0:
            return 0.0
        return float(np.clip(np.dot(vec1, vec2) / magnitude, 0.0, 1.0))


METRICS: Dict[str, SimilarityMetric] = {
    DiceBigramMetric.name: DiceBigramMetric(),
    TokenCosineMetric.name: TokenCosineMetric(),
}


def get_metric(name: str) -> SimilarityMetric:
    """
    Look up a registered similarity metric.

    Raises:
        ConfigurationError: If no metric is registered under the name
    """
    try:
        return METRICS[name]
    except KeyError:
        raise ConfigurationError(f"Unknown similarity metric. Available: {', '.join(METRICS)}",
                                 config_key="similarity_metric", config_value=str(name)) from None


class SimilarityScorer:
    """
    Similarity scorer for a candidate text against a corpus snapshot.

    Corpus documents are extracted and compared concurrently on a thread
    pool; results are collected in corpus order. A comparison that fails
    extraction or misses its time budget is skipped, never fatal.

    Attributes:
        extractor: Text extractor used for corpus documents
        metric: Similarity metric returning values in [0, 1]
    """

    def __init__(self, config: Optional[Config] = None, extractor: Optional[TextExtractor] = None,
                 metric: Optional[SimilarityMetric] = None) -> None:
        """
        Initialize the similarity scorer.

        Args:
            config: Optional configuration object
            extractor: Text extractor for corpus documents
            metric: Similarity metric; defaults to the configured one
        """
        defaults = Settings()
        analysis = config.get_analysis_config() if config else defaults.analysis
        processing = config.get_processing_config() if config else defaults.processing

        self.extractor = extractor or TextExtractor(config)
        self.metric = metric or get_metric(analysis["similarity_metric"])
        self.reporting_threshold = float(analysis["reporting_threshold"])
        self.preview_length = int(analysis["preview_length"])
        self.max_workers = int(processing["max_workers"])
        self.comparison_timeout = float(processing["comparison_timeout_seconds"])
        self.total_timeout = float(processing["timeout_seconds"])

        log.info(f"Similarity scorer initialized (metric: {getattr(self.metric, 'name', self.metric)})")

    def compare(self, candidate_text: str, document: CorpusDocument) -> Tuple[float, str]:
        """
        Compare the candidate text with one corpus document.

        Args:
            candidate_text: Text of the submitted document
            document: Corpus document to compare against

        Returns:
            Tuple of (similarity percentage, comparison text)

        Raises:
            ComparisonExtractionError: If the corpus document cannot be extracted
        """
        try:
            comparison_text = self.extractor.extract(document.file_bytes, document.content_type)
        except Exception as e:
            raise ComparisonExtractionError(document.document_id, get_error_context(e)) from e

        similarity = min(max(float(self.metric(candidate_text, comparison_text)), 0.0), 1.0)
        return similarity * 100, comparison_text

    def make_preview(self, comparison_text: str) -> str:
        return comparison_text[:self.preview_length] + '...'

    def score_similarity(self, candidate_text: str, candidate_id,
                         corpus: Iterable[CorpusDocument]) -> SimilarityResult:
        """
        Score a candidate text against a corpus.

        Args:
            candidate_text: Text of the submitted document
            candidate_id: Identity of the submitted document, never compared with itself
            corpus: Comparable corpus documents; read once

        Returns:
            SimilarityResult with details in corpus order
        """
        exclude = None if candidate_id is None else str(candidate_id)
        snapshot = [doc for doc in list(corpus) if doc.document_id != exclude]
        if not snapshot:
            log.info("No comparable documents in corpus")
            return SimilarityResult()

        log.info(f"Comparing document {candidate_id} against {len(snapshot)} corpus documents")

        details: List[MatchDetail] = []
        skipped: List[str] = []
        partial = False
        deadline = time.monotonic() + self.total_timeout if self.total_timeout > 0 else None

        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(snapshot)),
                                      thread_name_prefix="docscreen-compare")
        try:
            futures = [executor.submit(self.compare, candidate_text, doc) for doc in snapshot]
            for doc, future in zip(snapshot, futures):
                try:
                    percentage, comparison_text = future.result(timeout=self._wait_budget(deadline))
                except FutureTimeoutError:
                    log.warning(f"Comparison with document {doc.document_id} timed out, skipping")
                    skipped.append(doc.document_id)
                    partial = True
                    continue
                except ComparisonExtractionError as e:
                    log_exception(log, e, f"Skipping document {doc.document_id}")
                    skipped.append(doc.document_id)
                    continue

                log.debug(f"Document {doc.document_id}: {percentage:.2f}% similar")
                if percentage > self.reporting_threshold:
                    details.append(MatchDetail(doc.document_id, percentage,
                                               self.make_preview(comparison_text)))
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        score = max((d.match_percentage for d in details), default=0.0)
        log.info(f"Similarity scan finished: score {score:.2f}%, {len(details)} matches, "
                 f"{len(skipped)} skipped{' (partial)' if partial else ''}")
        return SimilarityResult(score=score, details=details, partial=partial, skipped=skipped)

    def _wait_budget(self, deadline: Optional[float]) -> Optional[float]:
        """Seconds to wait for the next comparison, None for no limit."""
        budgets = []
        if self.comparison_timeout > 0:
            budgets.append(self.comparison_timeout)
        if deadline is not None:
            budgets.append(max(0.0, deadline - time.monotonic()))
        return min(budgets) if budgets else None
