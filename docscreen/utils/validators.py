"""
Input validation utilities for DocScreen.

This module provides validation for the values crossing the boundary
of the analysis pipeline: content types, buffer sizes and file paths.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..models.document import ContentType
from .config import MAX_DOCUMENT_BYTES
from .exceptions import ValidationError, DocumentTooLargeError, UnsupportedFormatError


log = logging.getLogger(__name__)


class InputValidator:
    """
    Input validation utilities for DocScreen.

    Provides validation methods for:
    - Declared content types
    - Document buffer sizes
    - File and directory paths
    """

    EXTENSION_CONTENT_TYPES = {
        '.pdf': ContentType.PDF,
        '.docx': ContentType.DOCX,
    }
    SUPPORTED_DOCUMENT_FORMATS = list(EXTENSION_CONTENT_TYPES)

    @classmethod
    def validate_content_type(cls, content_type) -> ContentType:
        """
        Validate a declared content type.

        Args:
            content_type: MIME type, short name or ContentType

        Returns:
            Resolved ContentType

        Raises:
            UnsupportedFormatError: If the content type is not supported
        """
        return ContentType.from_value(content_type)

    @classmethod
    def validate_document_size(cls, raw_bytes: bytes, limit: int = MAX_DOCUMENT_BYTES) -> int:
        """
        Validate a document buffer against the size limit.

        Args:
            raw_bytes: Document buffer
            limit: Maximum size in bytes

        Returns:
            Size of the buffer

        Raises:
            ValidationError: If the buffer is not bytes-like
            DocumentTooLargeError: If the buffer exceeds the limit
        """
        if not isinstance(raw_bytes, (bytes, bytearray, memoryview)):
            raise ValidationError("Document content must be bytes", field="raw_bytes",
                                  value=type(raw_bytes).__name__)
        size = len(raw_bytes)
        if size > limit:
            raise DocumentTooLargeError(size, limit)
        return size

    @classmethod
    def validate_file_path(cls, file_path: Union[str, Path], must_exist: bool = True,
                           extensions: Optional[List[str]] = None) -> Path:
        """
        Validate a file path.

        Args:
            file_path: Path to validate
            must_exist: Whether the file must exist
            extensions: List of allowed extensions (with dots)

        Returns:
            Validated, resolved Path object

        Raises:
            ValidationError: If path is invalid
        """
        if not isinstance(file_path, (str, Path)):
            raise ValidationError("File path must be a string or Path object")

        file_path = Path(file_path).resolve()

        if must_exist:
            if not file_path.exists():
                raise ValidationError(f"File does not exist: {file_path}")
            if not file_path.is_file():
                raise ValidationError(f"Path is not a file: {file_path}")

        if extensions:
            if file_path.suffix.lower() not in [ext.lower() for ext in extensions]:
                valid_exts = ', '.join(extensions)
                raise ValidationError(f"File must have one of these extensions: {valid_exts}")

        return file_path

    @classmethod
    def validate_document_file(cls, file_path: Union[str, Path]) -> Path:
        """Validate a path to an existing PDF or DOCX document."""
        return cls.validate_file_path(file_path, must_exist=True,
                                      extensions=cls.SUPPORTED_DOCUMENT_FORMATS)

    @classmethod
    def validate_directory_path(cls, dir_path: Union[str, Path]) -> Path:
        """
        Validate an existing directory path.

        Args:
            dir_path: Path to validate

        Returns:
            Validated, resolved Path object

        Raises:
            ValidationError: If path is missing or not a directory
        """
        if not isinstance(dir_path, (str, Path)):
            raise ValidationError("Directory path must be a string or Path object")

        dir_path = Path(dir_path).resolve()
        if not dir_path.exists():
            raise ValidationError(f"Directory does not exist: {dir_path}")
        if not dir_path.is_dir():
            raise ValidationError(f"Path is not a directory: {dir_path}")
        return dir_path

    @classmethod
    def content_type_for_path(cls, file_path: Union[str, Path]) -> ContentType:
        """
        Infer the content type of a file from its extension.

        Raises:
            UnsupportedFormatError: If the extension is not supported
        """
        suffix = Path(file_path).suffix.lower()
        try:
            return cls.EXTENSION_CONTENT_TYPES[suffix]
        except KeyError:
            raise UnsupportedFormatError(suffix or str(file_path)) from None
