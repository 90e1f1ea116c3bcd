"""
Keyword extraction for DocScreen.

Frequency-ranks the distinctive terms of a document's text.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from ..utils.config import Config, Settings


log = logging.getLogger(__name__)

# ASCII word characters only
NON_WORD_PATTERN = re.compile(r'[^A-Za-z0-9_\s]')
WHITESPACE_PATTERN = re.compile(r'\s+')


class KeywordExtractor:
    """Rank the most frequent non-stop-word terms of a text."""

    def __init__(self, config: Optional[Config] = None) -> None:
        analysis = config.get_analysis_config() if config else Settings().analysis
        self.limit = int(analysis["keyword_limit"])
        self.min_length = int(analysis["min_keyword_length"])
        self.stop_words = frozenset(analysis["stop_words"])

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into candidate keywords.

        Args:
            text: Input text

        Returns:
            Lower-case tokens long enough and not in the stop list, in text order
        """
        cleaned = NON_WORD_PATTERN.sub('', text.lower())
        return [
            word for word in WHITESPACE_PATTERN.split(cleaned)
            if len(word) >= self.min_length and word not in self.stop_words
        ]

    def term_frequencies(self, text: str) -> Dict[str, int]:
        """Count token frequencies; the dict keeps first-occurrence order."""
        frequencies: Dict[str, int] = {}
        for word in self.tokenize(text):
            frequencies[word] = frequencies.get(word, 0) + 1
        return frequencies

    def extract_keywords(self, text: str) -> List[str]:
        """
        Extract the most frequent terms.

        Ties keep the order in which the terms first occur in the text.

        Args:
            text: Document text

        Returns:
            Up to ``keyword_limit`` distinct terms, most frequent first
        """
        if not text:
            return []
        frequencies = self.term_frequencies(text)
        ranked = sorted(frequencies.items(), key=lambda item: -item[1])
        keywords = [word for word, _ in ranked[:self.limit]]
        log.debug(f"Extracted {len(keywords)} keywords from {len(frequencies)} distinct terms")
        return keywords
