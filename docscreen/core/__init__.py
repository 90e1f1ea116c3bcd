"""
Core package initialization for DocScreen.

This module provides text extraction, the preview analyzers, the
corpus similarity scorer and the analyzer that sequences them.
"""

from .analyzer import DocumentAnalyzer, PREVIEW_UNAVAILABLE_MESSAGE
from .text_extractor import TextExtractor
from .keywords import KeywordExtractor
from .abstract_selector import AbstractSelector
from .summarizer import SummaryGenerator
from .similarity import SimilarityScorer, DiceBigramMetric, TokenCosineMetric, get_metric
from .corpus import CorpusProvider, InMemoryCorpus, DirectoryCorpus
from .relevance import RelevanceRanker

__all__ = [
    "DocumentAnalyzer",
    "PREVIEW_UNAVAILABLE_MESSAGE",
    "TextExtractor",
    "KeywordExtractor",
    "AbstractSelector",
    "SummaryGenerator",
    "SimilarityScorer",
    "DiceBigramMetric",
    "TokenCosineMetric",
    "get_metric",
    "CorpusProvider",
    "InMemoryCorpus",
    "DirectoryCorpus",
    "RelevanceRanker",
]
