"""Document root: the whole task collection as stored.

Format:
- {"tasks": [...]} with one `TaskDocument` per task, in collection order.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from adapters.task_document import TaskDocument
from core.domain.models import TaskCollection


class CollectionDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    tasks: list[TaskDocument] = Field(default_factory=list)

    @classmethod
    def from_model(cls, collection: TaskCollection) -> CollectionDocument:
        return cls(tasks=[TaskDocument.from_model(task) for task in collection.tasks])

    def to_model(self) -> TaskCollection:
        """Convert every record, in order, or fail on the first bad one.

        The record's own error propagates unchanged; no partial collection
        is ever returned.
        """

        return TaskCollection(tasks=[record.to_model() for record in self.tasks])
