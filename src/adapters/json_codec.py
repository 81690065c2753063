"""JSON codec for the task collection document.

Why JSON:
- Human-readable and easy to fix by hand when a load fails.
- `null` and a missing key both mean "not present", distinct from "".
"""

from __future__ import annotations

import json

from adapters.collection_document import CollectionDocument


class JsonDocumentCodec:
    """Parse/serialize `CollectionDocument` as UTF-8 JSON with a stable layout."""

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def parse(self, data: bytes) -> CollectionDocument:
        """Parse raw bytes.

        Raises `pydantic.ValidationError` (a `ValueError`) for invalid JSON,
        invalid UTF-8, or JSON that is not of the document shape.
        """

        return CollectionDocument.model_validate_json(data)

    def serialize(self, document: CollectionDocument) -> bytes:
        payload = document.model_dump(mode="json")
        text = json.dumps(payload, ensure_ascii=False, indent=self._indent or None) + "\n"
        return text.encode("utf-8")
