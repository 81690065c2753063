"""Storage contracts.

Why Protocol:
- Structural contracts (duck typing) without rigid inheritance.
- Codecs and file utilities stay interchangeable, and tests can pass
  in-memory fakes without touching the disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.models import TaskCollection

if TYPE_CHECKING:
    from adapters.collection_document import CollectionDocument


@runtime_checkable
class DocumentCodec(Protocol):
    """Raw parse/serialize of the on-disk document format.

    Rules:
    - `parse` raises `ValueError` (or a subclass) for bytes that are not a
      well-formed document of the expected shape.
    - `serialize` is total for any document built from valid model data.
    """

    def parse(self, data: bytes) -> CollectionDocument:
        ...

    def serialize(self, document: CollectionDocument) -> bytes:
        ...


@runtime_checkable
class FileUtility(Protocol):
    """Blocking file access used by the store."""

    def exists(self, path: Path) -> bool:
        ...

    def create_if_missing(self, path: Path) -> None:
        ...

    def read_bytes(self, path: Path) -> bytes:
        ...

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Write `data` so that readers see either the old or the new content."""

        ...


@runtime_checkable
class TaskCollectionStorage(Protocol):
    """What the rest of the application uses to persist the task collection."""

    @property
    def file_path(self) -> Path:
        ...

    def load(self, path: Path | None = None) -> TaskCollection | None:
        ...

    def save(self, collection: TaskCollection, path: Path | None = None) -> None:
        ...
