"""
Utility functions and helpers for DocScreen.

This package provides configuration management, input validation
and the exception hierarchy. The validators module depends on the
models package and is imported directly as ``docscreen.utils.validators``.
"""

from .config import Config, Settings
from .exceptions import (
    DocScreenError,
    ValidationError,
    UnsupportedFormatError,
    DocumentTooLargeError,
    ProcessingError,
    CorruptDocumentError,
    ComparisonExtractionError,
    ConfigurationError,
)

__all__ = [
    "Config",
    "Settings",
    "DocScreenError",
    "ValidationError",
    "UnsupportedFormatError",
    "DocumentTooLargeError",
    "ProcessingError",
    "CorruptDocumentError",
    "ComparisonExtractionError",
    "ConfigurationError",
]
