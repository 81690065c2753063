# tests/test_task_document.py

from __future__ import annotations

from typing import Any

import pytest

from adapters.task_document import AttachmentDocument, TagDocument, TaskDocument
from core.domain.errors import DuplicateAttachmentName, FieldConstraintViolation, MissingField
from core.domain.fields import Deadline, Phone, Tag

from .typical_tasks import DENTIST, GROCERIES, REPORT, make_task


def _record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "name": "Submit report",
        "phone": "98765432",
        "priority": "1",
        "deadline": "2024-03-01T17:30:00",
        "email": "alice@example.com",
        "address": "123, Jurong West Ave 6, #08-111",
        "tagged": [{"tag": "work"}],
        "attachments": [{"name": "slides", "path": "/home/alice/slides.pdf"}],
    }
    record.update(overrides)
    return record


def _doc(**overrides: Any) -> TaskDocument:
    return TaskDocument.model_validate(_record(**overrides))


@pytest.mark.parametrize(
    "task",
    [
        REPORT,
        GROCERIES,
        DENTIST,
        make_task(),
        make_task(deadline="2024-03-01T17:30:00.250000"),
        make_task(tags=("a", "B", "c3"), attachments=(("x", ""), ("y", "y"))),
    ],
)
def test_round_trip(task):
    assert TaskDocument.from_model(task).to_model() == task


def test_valid_record_converts():
    task = _doc().to_model()
    assert task.name.value == "Submit report"
    assert task.tags == frozenset({Tag.make("work")})
    assert {(a.name, a.path) for a in task.attachments} == {("slides", "/home/alice/slides.pdf")}


def test_missing_name_and_phone_reports_name():
    with pytest.raises(MissingField) as excinfo:
        _doc(name=None, phone=None).to_model()
    assert excinfo.value.field == "Name"
    assert str(excinfo.value) == "Task's Name field is missing!"


@pytest.mark.parametrize(
    "attribute, field",
    [
        ("name", "Name"),
        ("phone", "Phone"),
        ("priority", "Priority"),
        ("deadline", "Deadline"),
        ("email", "Email"),
        ("address", "Address"),
    ],
)
def test_missing_field(attribute, field):
    record = _record()
    del record[attribute]
    with pytest.raises(MissingField) as excinfo:
        TaskDocument.model_validate(record).to_model()
    assert excinfo.value.field == field


def test_empty_string_is_present_but_invalid():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(name="").to_model()
    assert excinfo.value.field == "Name"


def test_invalid_phone():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(phone="+651234").to_model()
    assert excinfo.value.field == "Phone"
    assert excinfo.value.message == Phone.MESSAGE_CONSTRAINTS


def test_first_violation_in_field_order_wins():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(address=" ", email="bad", priority="9").to_model()
    assert excinfo.value.field == "Priority"


def test_missing_field_after_an_invalid_one_is_not_reported():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(phone="12", email=None).to_model()
    assert excinfo.value.field == "Phone"


def test_unparseable_deadline_is_a_field_constraint_violation():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(deadline="sometime next week").to_model()
    assert excinfo.value.field == "Deadline"
    assert excinfo.value.message == Deadline.MESSAGE_CONSTRAINTS


def test_invalid_tag_fails_the_record():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(tagged=[{"tag": "ok"}, {"tag": "not ok"}]).to_model()
    assert excinfo.value.field == "Tag"


def test_missing_tag_value():
    with pytest.raises(MissingField) as excinfo:
        _doc(tagged=[{}]).to_model()
    assert excinfo.value.field == "Tag"


def test_repeated_tags_collapse():
    task = _doc(tagged=[{"tag": "work"}, {"tag": "work"}]).to_model()
    assert task.tags == frozenset({Tag.make("work")})


def test_null_lists_mean_empty():
    task = _doc(tagged=None, attachments=None).to_model()
    assert task.tags == frozenset()
    assert task.attachments == frozenset()


def test_duplicate_attachment_name_regardless_of_content():
    attachments = [
        {"name": "slides", "path": "/talks/v1.pdf"},
        {"name": "slides", "path": "/talks/v2.pdf"},
    ]
    with pytest.raises(DuplicateAttachmentName) as excinfo:
        _doc(attachments=attachments).to_model()
    assert excinfo.value.name == "slides"


def test_identical_attachments_are_still_duplicates():
    attachment = {"name": "slides", "path": "/talks/v1.pdf"}
    with pytest.raises(DuplicateAttachmentName):
        _doc(attachments=[attachment, dict(attachment)]).to_model()


def test_attachment_names_differing_in_case_are_distinct():
    attachments = [{"name": "slides", "path": "/a"}, {"name": "Slides", "path": "/b"}]
    task = _doc(attachments=attachments).to_model()
    assert len(task.attachments) == 2


def test_invalid_attachment_name():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(attachments=[{"name": "../etc/passwd", "path": "/x"}]).to_model()
    assert excinfo.value.field == "Attachment name"


def test_missing_attachment_parts():
    with pytest.raises(MissingField) as excinfo:
        _doc(attachments=[{"path": "/x"}]).to_model()
    assert excinfo.value.field == "Attachment name"

    with pytest.raises(MissingField) as excinfo:
        _doc(attachments=[{"name": "slides"}]).to_model()
    assert excinfo.value.field == "Attachment path"


def test_attachment_path_with_lone_surrogate():
    with pytest.raises(FieldConstraintViolation) as excinfo:
        _doc(attachments=[{"name": "slides", "path": "/home/alice/\ud800.pdf"}]).to_model()
    assert excinfo.value.field == "Attachment path"


def test_from_model_copies_fields_in_document_form():
    doc = TaskDocument.from_model(REPORT)
    assert doc.name == "Submit report"
    assert doc.deadline == "2024-03-01T17:30:00"
    assert doc.tagged == [TagDocument(tag="urgent"), TagDocument(tag="work")]
    assert doc.attachments == [
        AttachmentDocument(name="notes.txt", path="/home/alice/notes.txt"),
        AttachmentDocument(name="slides", path="/home/alice/slides.pdf"),
    ]


def test_from_model_is_deterministic():
    task = make_task(tags=("z", "a", "m"))
    assert TaskDocument.from_model(task) == TaskDocument.from_model(task)


def test_document_equality_is_order_sensitive():
    first = _doc(tagged=[{"tag": "a"}, {"tag": "b"}])
    second = _doc(tagged=[{"tag": "b"}, {"tag": "a"}])
    assert first != second
    assert first.to_model() == second.to_model()


def test_document_equality_is_field_wise():
    assert _doc() == _doc()
    assert _doc() != _doc(address="Somewhere else")
