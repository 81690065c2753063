"""Constrained scalar values of a task (Pydantic v2, frozen).

Each kind exposes:
- `is_valid(raw)`: pure and total predicate. Never raises, whatever it is given.
- `make(raw)`: builds the wrapper or raises `FieldConstraintViolation`.

The wrapped value is the raw string, stored as-is (no trimming, no case
folding), so two different valid inputs never become equal values.
Direct construction (`Name(value=...)`) applies the same rule through a
Pydantic validator.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import ClassVar, TypeVar

from dateutil import parser as date_parser
from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict

from core.domain.errors import FieldConstraintViolation

T = TypeVar("T", bound="ConstrainedText")


def is_utf8_text(raw: str) -> bool:
    """False when `raw` holds lone surrogates, which UTF-8 cannot encode."""

    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class ConstrainedText(BaseModel):
    """A string that must match `PATTERN` in full."""

    model_config = ConfigDict(frozen=True)

    KIND: ClassVar[str] = "Value"
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Value is not valid"
    PATTERN: ClassVar[re.Pattern[str] | None] = None

    value: str

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        if not isinstance(raw, str) or cls.PATTERN is None:
            return False
        return cls.PATTERN.fullmatch(raw) is not None and is_utf8_text(raw)

    @classmethod
    def make(cls: type[T], raw: str) -> T:
        if not cls.is_valid(raw):
            raise FieldConstraintViolation(cls.KIND, cls.MESSAGE_CONSTRAINTS)
        return cls(value=raw)

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: str) -> str:
        if not cls.is_valid(value):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return value

    def __str__(self) -> str:
        return self.value


class Name(ConstrainedText):
    KIND = "Name"
    MESSAGE_CONSTRAINTS = (
        "Task names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


class Phone(ConstrainedText):
    KIND = "Phone"
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    PATTERN = re.compile(r"[0-9]{3,}")


class Priority(ConstrainedText):
    """Urgency from 1 (highest) to 5 (lowest), kept in its textual form."""

    KIND = "Priority"
    MESSAGE_CONSTRAINTS = "Priority should be a whole number from 1 (highest) to 5 (lowest)"
    PATTERN = re.compile(r"[1-5]")

    @property
    def level(self) -> int:
        return int(self.value)


class Email(ConstrainedText):
    KIND = "Email"
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (!#$%&'*+/=?`{|}~^.-).\n"
        "2. This is followed by a '@' and then a domain name. The domain name must:\n"
        "    - be at least 2 characters long\n"
        "    - start and end with alphanumeric characters\n"
        "    - consist of alphanumeric characters, a period or a hyphen for the characters in between, if any."
    )
    PATTERN = re.compile(r"[\w!#$%&'*+/=?`{|}~^.-]+@[^\W_][a-zA-Z0-9.-]*[^\W_]", re.ASCII)


class Address(ConstrainedText):
    KIND = "Address"
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    # First character must not be whitespace; `.` keeps it to a single line.
    PATTERN = re.compile(r"[^\s].*")


class Tag(ConstrainedText):
    KIND = "Tag"
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    PATTERN = re.compile(r"[A-Za-z0-9]+")


class AttachmentName(ConstrainedText):
    KIND = "Attachment name"
    MESSAGE_CONSTRAINTS = (
        "Attachment names should be non-blank file names of at most 255 characters, "
        "without slashes, control characters or surrounding spaces"
    )
    PATTERN = re.compile(r"[^/\\\x00-\x1f\x7f]{1,255}")

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        if not isinstance(raw, str) or not super().is_valid(raw):
            return False
        return raw == raw.strip() and raw not in (".", "..")


# Two defaults that differ in year, month and day. A text that parses to the
# same moment under both names a full calendar date on its own.
_PROBE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_deadline(raw: str) -> datetime:
    """Parse a free-form deadline into a `datetime`.

    ISO 8601 text (what `Deadline.__str__` produces) is read with
    `datetime.fromisoformat`; anything else goes through `dateutil`.
    Raises `ValueError` when the text is not a date, leaves any of year,
    month or day unspecified, or abbreviates the year to two digits.
    """

    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        pass

    try:
        first = date_parser.parse(raw, default=_PROBE_DEFAULTS[0])
        second = date_parser.parse(raw, default=_PROBE_DEFAULTS[1])
    except Exception as exc:  # dateutil also fails with OverflowError and friends
        raise ValueError(f"{raw!r} is not a date") from exc
    if first != second:
        raise ValueError(f"{raw!r} does not name a full calendar date")
    # dateutil widens two-digit years around the current year.
    if f"{first.year:04d}" not in raw:
        raise ValueError(f"{raw!r} does not spell out a four-digit year")
    return first


class Deadline(BaseModel):
    """A structured point in time; `str()` is its canonical ISO 8601 form."""

    model_config = ConfigDict(frozen=True)

    KIND: ClassVar[str] = "Deadline"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Deadlines should be a date, optionally with a time, e.g. 2024-03-01 or 2024-03-01T17:30"
    )

    value: datetime

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        if not isinstance(raw, str):
            return False
        try:
            parse_deadline(raw)
        except ValueError:
            return False
        return True

    @classmethod
    def make(cls, raw: str) -> Deadline:
        if not isinstance(raw, str):
            raise FieldConstraintViolation(cls.KIND, cls.MESSAGE_CONSTRAINTS)
        try:
            moment = parse_deadline(raw)
        except ValueError as exc:
            raise FieldConstraintViolation(cls.KIND, cls.MESSAGE_CONSTRAINTS) from exc
        return cls(value=moment)

    def __str__(self) -> str:
        return self.value.isoformat()


def is_valid_name(raw: object) -> bool:
    return Name.is_valid(raw)


def is_valid_phone(raw: object) -> bool:
    return Phone.is_valid(raw)


def is_valid_priority(raw: object) -> bool:
    return Priority.is_valid(raw)


def is_valid_deadline(raw: object) -> bool:
    return Deadline.is_valid(raw)


def is_valid_email(raw: object) -> bool:
    return Email.is_valid(raw)


def is_valid_address(raw: object) -> bool:
    return Address.is_valid(raw)


def is_valid_tag(raw: object) -> bool:
    return Tag.is_valid(raw)


def is_valid_attachment_name(raw: object) -> bool:
    return AttachmentName.is_valid(raw)
