"""
Comparison corpus collaborators for DocScreen.

The analyzer only needs ``list_comparable(exclude_id)``; the classes
here provide that interface over memory and over a directory of files.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union

from ..models.analysis import SubmissionOutcome
from ..models.document import CorpusDocument, DocumentStatus, SourceDocument
from ..utils.validators import InputValidator


log = logging.getLogger(__name__)


class CorpusProvider(Protocol):
    """Read-only view of the documents a submission is compared against."""

    def list_comparable(self, exclude_id) -> List[CorpusDocument]:
        ...


class InMemoryCorpus:
    """
    Document store kept in memory.

    Only approved documents are comparable. ``list_comparable`` returns a
    fresh list, so documents added while a scan runs are not seen by it.
    """

    def __init__(self) -> None:
        self._documents: Dict[str, CorpusDocument] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def add(self, document_id, source: SourceDocument,
            status: DocumentStatus = DocumentStatus.PENDING) -> CorpusDocument:
        """
        Store a document.

        Args:
            document_id: Identity of the document
            source: Uploaded document
            status: Initial review status

        Returns:
            The stored corpus document
        """
        document = CorpusDocument(
            document_id=str(document_id),
            file_bytes=bytes(source.raw_bytes),
            content_type=source.content_type,
            original_name=source.original_name,
            status=status,
        )
        with self._lock:
            self._documents[document.document_id] = document
        log.debug(f"Stored document {document.document_id} ({document.status.value})")
        return document

    def get(self, document_id) -> Optional[CorpusDocument]:
        with self._lock:
            return self._documents.get(str(document_id))

    def set_status(self, document_id, status: DocumentStatus) -> None:
        """
        Change the review status of a stored document.

        Raises:
            KeyError: If no document is stored under the ID
        """
        with self._lock:
            self._documents[str(document_id)].status = DocumentStatus(status)

    def record_outcome(self, outcome: SubmissionOutcome) -> None:
        """Store the status decided by the submission flow."""
        self.set_status(outcome.document_id, outcome.decided_status)

    def list_comparable(self, exclude_id=None) -> List[CorpusDocument]:
        exclude = None if exclude_id is None else str(exclude_id)
        with self._lock:
            return [
                doc for doc in self._documents.values()
                if doc.status is DocumentStatus.APPROVED and doc.document_id != exclude
            ]


class DirectoryCorpus:
    """
    Corpus made of every PDF and DOCX file in a directory.

    All files count as approved; the file name is the document ID.
    Files are read on each ``list_comparable`` call, sorted by name.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = InputValidator.validate_directory_path(directory)

    def paths(self) -> List[Path]:
        return sorted(
            path for path in self.directory.iterdir()
            if path.is_file() and path.suffix.lower() in InputValidator.SUPPORTED_DOCUMENT_FORMATS
        )

    def load(self, path: Path) -> CorpusDocument:
        return CorpusDocument(
            document_id=path.name,
            file_bytes=path.read_bytes(),
            content_type=InputValidator.content_type_for_path(path).value,
            original_name=path.name,
        )

    def list_comparable(self, exclude_id=None) -> List[CorpusDocument]:
        exclude = None if exclude_id is None else str(exclude_id)
        documents = [self.load(path) for path in self.paths() if path.name != exclude]
        log.info(f"Loaded {len(documents)} corpus documents from {self.directory}")
        return documents
