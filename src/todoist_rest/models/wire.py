"""Write-schema model and due-date forms sent to the remote service."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from .task import Due

DUE_LANG = "en"


@dataclass(frozen=True)
class NoDue:
    """The task has no due date; no due field is sent."""


@dataclass(frozen=True)
class StringOnly:
    """Only the free-text description is known."""

    string: str


@dataclass(frozen=True)
class DateOnly:
    """A whole-day due date."""

    date: str


@dataclass(frozen=True)
class DateTime:
    """An exact due time."""

    datetime: str


DueForm = NoDue | StringOnly | DateOnly | DateTime


def resolve_due(due: Due | None) -> DueForm:
    """Pick the authoritative due form: exact time, then date, then free text."""
    if due is None:
        return NoDue()
    if due.datetime is not None:
        return DateTime(due.datetime)
    if due.date is not None:
        return DateOnly(due.date)
    return StringOnly(due.string)


class TaskWrite(BaseModel):
    """Task payload accepted by the create/update endpoints.

    Field order is the order on the wire. Dump with ``exclude_unset=True``: the first
    five fields are always passed explicitly, due fields only for the resolved form.
    """

    content: str
    project_id: int | None
    order: int | None
    label_ids: list[int]
    priority: int
    due_datetime: str | None = None
    due_date: str | None = None
    due_string: str | None = None
    due_lang: str | None = None
