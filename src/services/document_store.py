"""Sources of blog document snapshots."""

from __future__ import annotations

import abc
from collections.abc import Iterable
from pathlib import Path

import msgspec

from errors.errors import DocumentStoreError
from models.blog_models import BlogDocument
from utils.logging_utils import setup_logging

logger = setup_logging(__name__)


class DocumentStore(abc.ABC):
    """Read-only access to blog documents."""

    @abc.abstractmethod
    def fetch_all_documents(self) -> list[BlogDocument]:
        """Return every document, published or not."""

    def fetch_published_documents(self) -> list[BlogDocument]:
        """Return the published documents in a single bounded read."""
        return [doc for doc in self.fetch_all_documents() if doc.is_published]

    def fetch_document_by_id(self, document_id: str) -> BlogDocument | None:
        for doc in self.fetch_all_documents():
            if doc.id == document_id:
                return doc
        return None


class InMemoryDocumentStore(DocumentStore):
    def __init__(self, documents: Iterable[BlogDocument] = ()):
        self._documents = list(documents)

    def fetch_all_documents(self) -> list[BlogDocument]:
        return list(self._documents)


class JsonDocumentStore(DocumentStore):
    """
    Documents kept in a JSON file holding an array of blog objects.

    The file is read again on every fetch, so each request sees its own
    snapshot.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch_all_documents(self) -> list[BlogDocument]:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read documents from {self.path}: {e}")
            raise DocumentStoreError(f"Could not read {self.path}") from e

        try:
            documents = msgspec.json.decode(raw, type=list[BlogDocument])
        except msgspec.ValidationError as e:
            logger.error(f"Invalid document in {self.path}: {e}")
            raise DocumentStoreError(f"Invalid document in {self.path}: {e}") from e
        except msgspec.DecodeError as e:
            logger.error(f"Malformed JSON in {self.path}: {e}")
            raise DocumentStoreError(f"Malformed JSON in {self.path}") from e

        logger.debug(f"Loaded {len(documents)} documents from {self.path}")
        return documents
