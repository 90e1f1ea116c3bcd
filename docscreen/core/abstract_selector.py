"""
Abstract selection for DocScreen.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..utils.config import Config, Settings


log = logging.getLogger(__name__)

PARAGRAPH_BREAK = re.compile(r'\n{2,}')


class AbstractSelector:
    """
    Pick the paragraph of a document most likely to be its abstract.

    Candidates in priority order: the first paragraph mentioning
    "abstract", the first paragraph of plausible abstract length that
    does not mention "introduction", the first paragraph.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        analysis = config.get_analysis_config() if config else Settings().analysis
        self.min_length = int(analysis["abstract_min_length"])
        self.max_length = int(analysis["abstract_max_length"])

    @staticmethod
    def split_paragraphs(text: str) -> List[str]:
        """Split on blank lines; blank paragraphs are dropped, the rest kept verbatim."""
        return [p for p in PARAGRAPH_BREAK.split(text) if p.strip()]

    def select_abstract(self, text: str) -> str:
        """
        Select the abstract candidate.

        Args:
            text: Document text

        Returns:
            The selected paragraph, or an empty string when the text has no paragraphs
        """
        paragraphs = self.split_paragraphs(text or '')
        if not paragraphs:
            return ''

        for paragraph in paragraphs:
            if 'abstract' in paragraph.lower():
                return paragraph

        for paragraph in paragraphs:
            if (self.min_length < len(paragraph) < self.max_length
                    and 'introduction' not in paragraph.lower()):
                return paragraph

        log.debug("No abstract-like paragraph found, using the first paragraph")
        return paragraphs[0]
