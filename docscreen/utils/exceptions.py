"""
Custom exceptions for DocScreen document analysis.

This module defines the exception classes used throughout DocScreen
for error reporting and for the recovery policy of the analysis flows.
"""

from __future__ import annotations


class DocScreenError(Exception):
    """
    Base exception class for DocScreen.

    All custom exceptions in DocScreen inherit from this base class.
    """

    def __init__(self, message: str = "", details: str = "") -> None:
        """
        Initialize exception.

        Args:
            message: Main error message
            details: Additional error details
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the exception."""
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


def _join_details(*pairs: tuple) -> str:
    return ", ".join(f"{label}: {value}" for label, value in pairs if value)


class ValidationError(DocScreenError):
    """
    Exception raised for input validation errors.

    Raised when a value handed to DocScreen (content type, buffer,
    path) fails validation before any parsing happens.
    """

    def __init__(self, message: str = "Validation failed", field: str = "", value: str = "") -> None:
        """
        Initialize validation error.

        Args:
            message: Validation error message
            field: Field name that failed validation
            value: Value that failed validation
        """
        super().__init__(message, _join_details(("field", field), ("value", value)))
        self.field = field
        self.value = value


class UnsupportedFormatError(ValidationError):
    """Raised when a document declares a content type that cannot be extracted."""

    def __init__(self, content_type: str = "", message: str = "Unsupported document format") -> None:
        super().__init__(message, field="content_type", value=str(content_type))
        self.content_type = content_type


class DocumentTooLargeError(ValidationError):
    """Raised when a document buffer exceeds the configured size limit."""

    def __init__(self, size: int = 0, limit: int = 0, message: str = "Document too large") -> None:
        super().__init__(message, field="size", value=f"{size} bytes > {limit} bytes")
        self.size = size
        self.limit = limit


class ProcessingError(DocScreenError):
    """
    Exception raised for processing errors.

    This exception is used when text extraction, similarity
    scoring or any other analysis step fails.
    """

    def __init__(self, message: str = "Processing failed", operation: str = "",
                 original_error: str = "") -> None:
        """
        Initialize processing error.

        Args:
            message: Processing error message
            operation: Operation that failed
            original_error: Original error message
        """
        super().__init__(message, _join_details(("operation", operation), ("error", original_error)))
        self.operation = operation
        self.original_error = original_error


class CorruptDocumentError(ProcessingError):
    """
    Raised when the parser cannot read the document being analysed.

    Fatal to the call it occurs in: extraction never falls back to
    returning partial text.
    """

    def __init__(self, content_type: str = "", original_error: str = "",
                 message: str = "Corrupt document") -> None:
        super().__init__(message, operation=f"extract {content_type}".strip(),
                         original_error=original_error)
        self.content_type = content_type


class ComparisonExtractionError(ProcessingError):
    """
    Raised when a corpus document cannot be extracted during scoring.

    The similarity scorer catches it, logs it and skips the document.
    """

    def __init__(self, document_id: str = "", original_error: str = "",
                 message: str = "Comparison document could not be extracted") -> None:
        super().__init__(message, operation=f"compare {document_id}".strip(),
                         original_error=original_error)
        self.document_id = document_id


class ConfigurationError(DocScreenError):
    """
    Exception raised for configuration errors.

    This exception is used when configuration files are invalid,
    missing, or contain invalid settings.
    """

    def __init__(self, message: str = "Configuration error", config_key: str = "",
                 config_value: str = "") -> None:
        """
        Initialize configuration error.

        Args:
            message: Configuration error message
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
        """
        super().__init__(message, _join_details(("key", config_key), ("value", config_value)))
        self.config_key = config_key
        self.config_value = config_value


def get_error_context(exception: Exception) -> str:
    """
    Get a formatted error context string for logging.

    Args:
        exception: Exception to format

    Returns:
        Formatted error context string
    """
    if isinstance(exception, DocScreenError):
        return str(exception)
    else:
        return f"{type(exception).__name__}: {str(exception)}"


def log_exception(logger, exception: Exception, context: str = "") -> None:
    """
    Log an exception with appropriate level and context.

    Args:
        logger: Logger instance
        exception: Exception to log
        context: Additional context information
    """
    error_message = get_error_context(exception)

    if context:
        full_message = f"{context} - {error_message}"
    else:
        full_message = error_message

    if isinstance(exception, (ValidationError, ConfigurationError, ComparisonExtractionError)):
        logger.warning(full_message)
    elif isinstance(exception, ProcessingError):
        logger.error(full_message)
    else:
        logger.error(full_message, exc_info=exception)
