"""Task collection stored as a single JSON document on disk.

Load: existence check -> read bytes -> codec parse -> `CollectionDocument.to_model`.
Save: `CollectionDocument.from_model` -> codec serialize -> atomic write.

The store keeps no copy of the data: every call is a full pass over the
whole document. It does no locking; callers serialize access to a path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from adapters.collection_document import CollectionDocument
from adapters.json_codec import JsonDocumentCodec
from adapters.local_files import LocalFileUtility
from core.domain.errors import DataConstraintError, DataValidationError, DocumentFormatError
from core.domain.models import TaskCollection
from core.interfaces.storage import DocumentCodec, FileUtility

logger = logging.getLogger(__name__)


class JsonTaskCollectionStore:
    """Reads and writes the task collection at a configured location."""

    def __init__(
        self,
        file_path: str | Path,
        *,
        codec: DocumentCodec | None = None,
        files: FileUtility | None = None,
    ) -> None:
        self._file_path = Path(file_path)
        self._codec = codec or JsonDocumentCodec()
        self._files = files or LocalFileUtility()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self, path: str | Path | None = None) -> TaskCollection | None:
        """Load the collection from the configured file, or from `path`.

        Returns None when the file does not exist (first run).
        Raises `DocumentFormatError` when the bytes are not a valid document,
        `DataConstraintError` when a record breaks a constraint. `OSError`
        from reading is passed through.
        """

        target = self._file_path if path is None else Path(path)

        if not self._files.exists(target):
            logger.info("Task collection file %s not found", target)
            return None

        raw = self._files.read_bytes(target)
        try:
            document = self._codec.parse(raw)
        except ValueError as exc:
            logger.info("Task collection file %s is not a valid document", target)
            raise DocumentFormatError(target, _summarize(exc)) from exc

        try:
            collection = document.to_model()
        except DataValidationError as exc:
            logger.info("Illegal values found in %s: %s", target, exc)
            raise DataConstraintError(target, exc) from exc

        logger.debug("Loaded %d task(s) from %s", len(collection), target)
        return collection

    def save(self, collection: TaskCollection, path: str | Path | None = None) -> None:
        """Write the whole collection to the configured file, or to `path`."""

        target = self._file_path if path is None else Path(path)

        self._files.create_if_missing(target)
        data = self._codec.serialize(CollectionDocument.from_model(collection))
        self._files.write_bytes(target, data)
        logger.debug("Saved %d task(s) to %s", len(collection), target)


def _summarize(exc: Exception) -> str:
    lines = str(exc).strip().splitlines()
    return " ".join(line.strip() for line in lines[:2]) if lines else type(exc).__name__
