"""
Text extraction for DocScreen.

This module converts an uploaded document buffer of a known content
type (PDF or DOCX) into normalized plain text.
"""

from __future__ import annotations

import io
import logging
import re
import zipfile
from typing import List, Optional
from xml.etree import ElementTree as ET

import fitz  # PyMuPDF

from ..models.document import ContentType
from ..utils.config import Config, MAX_DOCUMENT_BYTES
from ..utils.exceptions import CorruptDocumentError
from ..utils.validators import InputValidator


log = logging.getLogger(__name__)

WORD_NAMESPACE = '{http://schemas.openxmlformats.org/wordprocessingml/2006/main}'
PARAGRAPH_SEPARATOR = '\n\n'
PDF_EOF_MARKER = b'%%EOF'
PDF_EOF_WINDOW = 1024


class TextExtractor:
    """
    Plain text extractor for uploaded documents.

    PDF pages are read with PyMuPDF, DOCX paragraphs straight from the
    WordprocessingML part of the archive. Extraction is a pure function
    of the buffer and the declared content type.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        """
        Initialize text extractor.

        Args:
            config: Optional configuration object
        """
        self.config = config
        self.max_document_bytes = MAX_DOCUMENT_BYTES
        if config is not None:
            self.max_document_bytes = int(config.get_processing_config()["max_document_bytes"])
        log.debug("Text extractor initialized")

    def extract(self, raw_bytes: bytes, content_type) -> str:
        """
        Extract normalized plain text from a document buffer.

        Args:
            raw_bytes: Document content
            content_type: Declared MIME type or short name ("pdf", "docx")

        Returns:
            Extracted text, pages or paragraphs in document order

        Raises:
            UnsupportedFormatError: If the content type is not supported
            DocumentTooLargeError: If the buffer exceeds the size limit
            CorruptDocumentError: If the document cannot be parsed
        """
        resolved = InputValidator.validate_content_type(content_type)
        InputValidator.validate_document_size(raw_bytes, self.max_document_bytes)

        if resolved is ContentType.PDF:
            text = self._extract_pdf(bytes(raw_bytes))
        else:
            text = self._extract_docx(bytes(raw_bytes))

        text = self.normalize(text)
        log.debug(f"Extracted {len(text)} characters from {resolved.short_name} document")
        return text

    @staticmethod
    def normalize(text: str) -> str:
        """Unify line endings and drop NUL characters."""
        text = re.sub(r'\r\n?', '\n', text)
        return text.replace('\x00', '')

    def _extract_pdf(self, raw_bytes: bytes) -> str:
        """
        Concatenate the text of all PDF pages.

        Args:
            raw_bytes: PDF content

        Returns:
            Page texts separated by blank lines
        """
        try:
            with fitz.open(stream=raw_bytes, filetype="pdf") as doc:
                if doc.is_repaired and not self._has_eof_marker(raw_bytes):
                    raise CorruptDocumentError("pdf", "document is truncated")
                if doc.page_count == 0:
                    raise CorruptDocumentError("pdf", "document has no pages")
                pages = [page.get_text("text") for page in doc]
        except CorruptDocumentError:
            raise
        except Exception as e:
            raise CorruptDocumentError("pdf", str(e)) from e

        return PARAGRAPH_SEPARATOR.join(pages)

    @staticmethod
    def _has_eof_marker(raw_bytes: bytes) -> bool:
        """
        Check the buffer tail for the end-of-file marker.

        PyMuPDF silently repairs both shifted cross-reference offsets and
        truncated files; only the latter lose the trailing ``%%EOF``.
        """
        return PDF_EOF_MARKER in raw_bytes[-PDF_EOF_WINDOW:]

    def _extract_docx(self, raw_bytes: bytes) -> str:
        """
        Extract raw paragraph text from a DOCX archive.

        Args:
            raw_bytes: DOCX content

        Returns:
            Paragraph texts separated by blank lines
        """
        try:
            with zipfile.ZipFile(io.BytesIO(raw_bytes)) as archive:
                data = archive.read('word/document.xml')
            root = ET.fromstring(data)
        except Exception as e:
            raise CorruptDocumentError("docx", str(e)) from e

        paragraphs = [self._paragraph_text(p) for p in root.iter(f'{WORD_NAMESPACE}p')]
        return PARAGRAPH_SEPARATOR.join(paragraphs)

    @staticmethod
    def _paragraph_text(paragraph: ET.Element) -> str:
        parts: List[str] = []
        for node in paragraph.iter():
            if node.tag == f'{WORD_NAMESPACE}t':
                parts.append(node.text or '')
            elif node.tag == f'{WORD_NAMESPACE}tab':
                parts.append('\t')
            elif node.tag in (f'{WORD_NAMESPACE}br', f'{WORD_NAMESPACE}cr'):
                parts.append('\n')
        return ''.join(parts)

    def get_supported_content_types(self) -> List[str]:
        """
        Get list of supported content types.

        Returns:
            List of MIME types
        """
        return [member.value for member in ContentType]
