"""Local filesystem access for the collection store.

Writes go through a temporary file in the target directory that is fsynced
and then renamed over the target (`os.replace`), so a reader sees either the
previous document or the new one, never a partial write.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path


class LocalFileUtility:
    def exists(self, path: Path) -> bool:
        return path.exists()

    def create_if_missing(self, path: Path) -> None:
        """Create the parent directories of `path`.

        The file itself only appears once `write_bytes` renames a complete
        document into place.
        """

        path.parent.mkdir(parents=True, exist_ok=True)

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise
