"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to any I/O library.
- Frozen models give value equality and hashing for free, which is what
  tasks, tags and attachments need.

Note:
- These models describe *what* a task is, not *how* it is stored. The loose
  document shapes live in `adapters.task_document`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.fields import (
    Address,
    AttachmentName,
    Deadline,
    Email,
    Name,
    Phone,
    Priority,
    Tag,
    is_utf8_text,
)

ATTACHMENT_PATH_CONSTRAINTS = "Attachment paths should be text that can be written as UTF-8"


class Attachment(BaseModel):
    """A named reference to a file kept with a task.

    The path is opaque to this layer: it is stored and compared, never opened.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Name of the attachment, unique within its task.",
    )
    path: str = Field(
        ...,
        description="Location of the attached content (opaque reference).",
    )

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not AttachmentName.is_valid(value):
            raise ValueError(AttachmentName.MESSAGE_CONSTRAINTS)
        return value

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not is_utf8_text(value):
            raise ValueError(ATTACHMENT_PATH_CONSTRAINTS)
        return value


class Task(BaseModel):
    """A task with its deadline, contact details, tags and attachments.

    Immutable: every edit produces a new `Task` (see `model_copy`).
    """

    model_config = ConfigDict(frozen=True)

    name: Name = Field(..., description="Short title of the task.")
    phone: Phone = Field(..., description="Contact number related to the task.")
    priority: Priority = Field(..., description="Urgency, 1 (highest) to 5 (lowest).")
    deadline: Deadline = Field(..., description="When the task is due.")
    email: Email = Field(..., description="Contact email related to the task.")
    address: Address = Field(..., description="Where the task takes place.")
    tags: frozenset[Tag] = Field(
        default_factory=frozenset,
        description="Labels attached to the task.",
    )
    attachments: frozenset[Attachment] = Field(
        default_factory=frozenset,
        description="Files attached to the task; names are unique per task.",
    )

    @model_validator(mode="after")
    def _check_attachment_names(self) -> Task:
        seen: set[str] = set()
        for attachment in self.attachments:
            if attachment.name in seen:
                raise ValueError(
                    f"Attachment names must be unique within a task: {attachment.name}"
                )
            seen.add(attachment.name)
        return self


class TaskCollection(BaseModel):
    """Aggregate persisted as one unit: the ordered list of all tasks.

    Duplicate tasks are allowed here; detecting them is up to the callers
    that edit the collection.
    """

    tasks: list[Task] = Field(
        default_factory=list,
        description="Tasks in their stored order.",
    )

    def __len__(self) -> int:
        return len(self.tasks)
