"""
Document models for DocScreen.

This module defines the data structures used to represent uploaded
documents, corpus entries and searchable document records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any

from ..utils.exceptions import UnsupportedFormatError


class ContentType(str, Enum):
    """Document content types the text extractor understands."""

    PDF = "application/pdf"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    @property
    def short_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_value(cls, value: Any) -> ContentType:
        """
        Resolve a content type from a MIME string or a short name.

        Args:
            value: ContentType, MIME type or one of "pdf"/"docx"

        Returns:
            Matching ContentType

        Raises:
            UnsupportedFormatError: If the value names no supported type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if normalized in (member.value, member.short_name):
                    return member
        raise UnsupportedFormatError(str(value))


class DocumentStatus(str, Enum):
    """Review status of a persisted document."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SourceDocument:
    """
    An uploaded document, held only for the duration of one analysis.

    Attributes:
        raw_bytes: File content
        content_type: Declared content type (MIME type or short name)
        original_name: File name given by the uploader
    """
    raw_bytes: bytes
    content_type: str
    original_name: str = ""

    @property
    def size(self) -> int:
        return len(self.raw_bytes)


@dataclass
class CorpusDocument:
    """
    A previously stored document eligible for similarity comparison.

    Attributes:
        document_id: Identity of the stored document
        file_bytes: Stored file content
        content_type: Stored content type
        original_name: Stored file name
        status: Review status of the stored document
    """
    document_id: str
    file_bytes: bytes
    content_type: str
    original_name: str = ""
    status: DocumentStatus = DocumentStatus.APPROVED

    def __post_init__(self) -> None:
        """Validate corpus document data after initialization."""
        if not self.document_id or not str(self.document_id).strip():
            raise ValueError("Corpus document ID cannot be empty")
        self.document_id = str(self.document_id)
        self.status = DocumentStatus(self.status)


@dataclass
class DocumentRecord:
    """
    Searchable metadata of a stored document.

    Attributes:
        document_id: Identity of the stored document
        title: Document title
        keywords: Keywords entered on submission
        abstract: Abstract entered on submission
    """
    document_id: str
    title: str = ""
    keywords: List[str] = field(default_factory=list)
    abstract: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "document_id": self.document_id,
            "title": self.title,
            "keywords": list(self.keywords),
            "abstract": self.abstract,
        }
