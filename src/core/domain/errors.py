"""Domain errors for the persistence layer.

Hierarchy:
- `TaskLedgerError` is the common base for everything raised on purpose.
- `DataValidationError` groups the record-level failures raised while turning
  a document into model objects (missing field, bad value, duplicate
  attachment name).
- `DocumentFormatError` and `DataConstraintError` are what `load` surfaces:
  the first means the file is not a well-formed document at all, the second
  wraps a `DataValidationError` found inside an otherwise readable document.

I/O failures (`OSError`) are never wrapped here.
"""

from __future__ import annotations

from pathlib import Path


MISSING_FIELD_MESSAGE_FORMAT = "Task's {field} field is missing!"


class TaskLedgerError(Exception):
    """Base class for errors raised by taskledger."""


class DataValidationError(TaskLedgerError):
    """A document record violates a field or record constraint."""


class MissingField(DataValidationError):
    """A required scalar is absent from a document record."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(MISSING_FIELD_MESSAGE_FORMAT.format(field=field))


class FieldConstraintViolation(DataValidationError):
    """A scalar is present but does not satisfy its validity rule."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DuplicateAttachmentName(DataValidationError):
    """Two attachments of the same task share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Attachment names must be unique within a task: {name}")


class DocumentFormatError(TaskLedgerError):
    """The stored bytes are not a well-formed task collection document."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path} is not a valid task collection document: {detail}")


class DataConstraintError(TaskLedgerError):
    """A readable document holds data that violates the model constraints."""

    def __init__(self, path: Path, cause: DataValidationError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Illegal values found in {path}: {cause}")
