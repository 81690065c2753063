"""Document form of a task (loose shape used on disk).

Every scalar is an optional string so that a document can describe anything
found in a file; `to_model` is the single way from this shape into the
validated `Task`. A field that is absent (missing key or `null`) is told
apart from an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.errors import DuplicateAttachmentName, FieldConstraintViolation, MissingField
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
from core.domain.models import ATTACHMENT_PATH_CONSTRAINTS, Attachment, Task


class TagDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    tag: str | None = None

    @classmethod
    def from_model(cls, tag: Tag) -> TagDocument:
        return cls(tag=tag.value)

    def to_model(self) -> Tag:
        if self.tag is None:
            raise MissingField(Tag.KIND)
        return Tag.make(self.tag)


class AttachmentDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    path: str | None = None

    @classmethod
    def from_model(cls, attachment: Attachment) -> AttachmentDocument:
        return cls(name=attachment.name, path=attachment.path)

    def to_model(self) -> Attachment:
        if self.name is None:
            raise MissingField(AttachmentName.KIND)
        name = AttachmentName.make(self.name)
        if self.path is None:
            raise MissingField("Attachment path")
        if not is_utf8_text(self.path):
            raise FieldConstraintViolation("Attachment path", ATTACHMENT_PATH_CONSTRAINTS)
        return Attachment(name=name.value, path=self.path)


@dataclass(frozen=True)
class _FieldStep:
    """One required scalar: where to read it and how to build it."""

    field: str
    attribute: str
    build: Callable[[str], Any]


# Checked in this order; the first failure is the one reported.
_FIELD_STEPS: tuple[_FieldStep, ...] = (
    _FieldStep(Name.KIND, "name", Name.make),
    _FieldStep(Phone.KIND, "phone", Phone.make),
    _FieldStep(Priority.KIND, "priority", Priority.make),
    _FieldStep(Deadline.KIND, "deadline", Deadline.make),
    _FieldStep(Email.KIND, "email", Email.make),
    _FieldStep(Address.KIND, "address", Address.make),
)


def unique_attachments(attachments: list[Attachment]) -> frozenset[Attachment]:
    """Fold attachments into a set, rejecting a repeated name.

    Names are compared exactly (case-sensitive); content plays no part.
    """

    seen_names: set[str] = set()
    result: set[Attachment] = set()
    for attachment in attachments:
        if attachment.name in seen_names:
            raise DuplicateAttachmentName(attachment.name)
        seen_names.add(attachment.name)
        result.add(attachment)
    return frozenset(result)


class TaskDocument(BaseModel):
    """A task record as stored: strings, lists, nothing enforced."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    phone: str | None = None
    priority: str | None = None
    deadline: str | None = None
    email: str | None = None
    address: str | None = None

    tagged: list[TagDocument] = Field(default_factory=list)
    attachments: list[AttachmentDocument] = Field(default_factory=list)

    @field_validator("tagged", "attachments", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_model(cls, task: Task) -> TaskDocument:
        """Copy a task into its document form (never fails).

        Tags and attachments come out sorted so that saving the same task
        always yields the same document.
        """

        return cls(
            name=task.name.value,
            phone=task.phone.value,
            priority=task.priority.value,
            deadline=str(task.deadline),
            email=task.email.value,
            address=task.address.value,
            tagged=[TagDocument.from_model(tag) for tag in sorted(task.tags, key=str)],
            attachments=[
                AttachmentDocument.from_model(attachment)
                for attachment in sorted(task.attachments, key=lambda a: a.name)
            ],
        )

    def to_model(self) -> Task:
        """Validate this record and build the `Task`.

        Raises `MissingField`, `FieldConstraintViolation` or
        `DuplicateAttachmentName` for the first problem found.
        """

        values: dict[str, Any] = {}
        for step in _FIELD_STEPS:
            raw = getattr(self, step.attribute)
            if raw is None:
                raise MissingField(step.field)
            values[step.attribute] = step.build(raw)

        tags = frozenset([tag.to_model() for tag in self.tagged])

        attachments = [attachment.to_model() for attachment in self.attachments]
        return Task(**values, tags=tags, attachments=unique_attachments(attachments))
