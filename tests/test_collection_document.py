# tests/test_collection_document.py

from __future__ import annotations

import json

import pytest

from adapters.collection_document import CollectionDocument
from adapters.task_document import TaskDocument
from core.domain.errors import FieldConstraintViolation, MissingField
from core.domain.models import TaskCollection

from .typical_tasks import DENTIST, GROCERIES, REPORT, typical_collection


def test_load_preserves_document_order():
    for order in ([REPORT, GROCERIES, DENTIST], [DENTIST, REPORT, GROCERIES]):
        document = CollectionDocument.from_model(TaskCollection(tasks=order))
        assert document.to_model().tasks == order


def test_from_model_preserves_order():
    document = CollectionDocument.from_model(typical_collection())
    assert [record.name for record in document.tasks] == [
        "Submit report",
        "Buy groceries",
        "Dentist appointment",
    ]


def test_round_trip(collection):
    assert CollectionDocument.from_model(collection).to_model() == collection


def test_empty_document_is_an_empty_collection():
    assert CollectionDocument.model_validate({}).to_model() == TaskCollection()


def test_typical_file_matches_typical_tasks(data_dir):
    raw = json.loads((data_dir / "typical_tasks.json").read_text(encoding="utf-8"))
    assert CollectionDocument.model_validate(raw).to_model() == typical_collection()


def test_invalid_file_raises(data_dir):
    raw = json.loads((data_dir / "invalid_task.json").read_text(encoding="utf-8"))
    with pytest.raises(FieldConstraintViolation) as excinfo:
        CollectionDocument.model_validate(raw).to_model()
    assert excinfo.value.field == "Phone"


def test_first_bad_record_aborts_with_its_own_error():
    good = TaskDocument.from_model(REPORT)
    missing_email = TaskDocument.from_model(GROCERIES).model_copy(update={"email": None})
    bad_phone = TaskDocument.from_model(DENTIST).model_copy(update={"phone": "x"})
    document = CollectionDocument(tasks=[good, missing_email, bad_phone])

    with pytest.raises(MissingField) as excinfo:
        document.to_model()
    assert excinfo.value.field == "Email"
