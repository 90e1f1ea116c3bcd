"""
Extractive summary generation for DocScreen.

This module scores the sentences of a document by position, length and
signal words and concatenates the best of them into a summary.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from ..utils.config import Config, Settings


log = logging.getLogger(__name__)

# A run of non-terminal characters closed by one or more terminal marks.
# Abbreviations and decimals split sentences too.
SENTENCE_PATTERN = re.compile(r'[^.!?]+[.!?]+')
WHITESPACE_PATTERN = re.compile(r'\s+')


@dataclass
class ScoredSentence:
    """
    A sentence with its summary score.

    Attributes:
        text: Trimmed sentence text
        index: Position of the sentence in the document
        score: Summary score
    """
    text: str
    index: int
    score: float


class SummaryGenerator:
    """
    Extractive summarizer.

    A sentence score depends only on its index, the sentence count
    and the sentence itself.
    """

    POSITION_BONUS = 0.3
    LENGTH_BONUS = 0.3
    SIGNAL_BONUS = 0.1
    MIN_WORDS = 10
    MAX_WORDS = 30

    def __init__(self, config: Optional[Config] = None) -> None:
        """
        Initialize summary generator.

        Args:
            config: Optional configuration object
        """
        analysis = config.get_analysis_config() if config else Settings().analysis
        self.max_sentences = int(analysis["summary_sentences"])
        self.position_fraction = float(analysis["position_fraction"])
        self.signal_words = [w.lower() for w in analysis["signal_words"]]

    @staticmethod
    def split_sentences(text: str) -> List[str]:
        """
        Split text into raw sentences.

        Text after the last terminal mark is not a sentence.

        Args:
            text: Document text

        Returns:
            Untrimmed sentences in document order
        """
        return SENTENCE_PATTERN.findall(text or '')

    def score_sentence(self, sentence: str, index: int, total: int) -> float:
        """
        Score one sentence.

        Args:
            sentence: Untrimmed sentence text
            index: Position of the sentence
            total: Number of sentences in the document

        Returns:
            Sum of the position, length and signal word bonuses
        """
        score = 0.0

        if index < total * self.position_fraction or index > total * (1 - self.position_fraction):
            score += self.POSITION_BONUS

        word_count = len(WHITESPACE_PATTERN.split(sentence))
        if self.MIN_WORDS < word_count < self.MAX_WORDS:
            score += self.LENGTH_BONUS

        lowered = sentence.lower()
        for word in self.signal_words:
            if word in lowered:
                score += self.SIGNAL_BONUS

        return score

    def score_sentences(self, text: str) -> List[ScoredSentence]:
        """Score every sentence of a text, in document order."""
        sentences = self.split_sentences(text)
        total = len(sentences)
        return [
            ScoredSentence(sentence.strip(), index, self.score_sentence(sentence, index, total))
            for index, sentence in enumerate(sentences)
        ]

    def generate_summary(self, text: str) -> str:
        """
        Generate an extractive summary.

        The selected sentences are joined in score order, not in the
        order they appear in the document.

        Args:
            text: Document text

        Returns:
            Up to ``summary_sentences`` sentences joined by single spaces
        """
        scored = self.score_sentences(text)
        if not scored:
            return ''

        ranked = sorted(scored, key=lambda s: s.score, reverse=True)
        selected = ranked[:self.max_sentences]
        log.debug(f"Selected {len(selected)} of {len(scored)} sentences for the summary")
        return ' '.join(s.text for s in selected)
