"""Conversion between Task models and the remote service's JSON wire format.

The read schema (service -> client) carries the full due object and the
server-assigned fields. The write schema (client -> service) is narrower:
server-assigned fields are never sent, and the due date is flattened into at
most one of ``due_datetime``, ``due_date`` or ``due_string`` + ``due_lang``,
chosen by specificity. Leaving all due fields out is how "no due date" is sent.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from todoist_rest.exceptions import DeserializationError
from todoist_rest.models.task import Task
from todoist_rest.models.wire import (
    DUE_LANG,
    DateOnly,
    DateTime,
    DueForm,
    NoDue,
    StringOnly,
    TaskWrite,
    resolve_due,
)

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


def decode_task(data: bytes | str) -> Task:
    """Parse a read-model JSON document into a Task.

    Raises:
        DeserializationError: If the JSON is malformed, a required field is
            missing, or a field has the wrong type
    """
    try:
        task = Task.model_validate_json(data)
    except PydanticValidationError as e:
        logger.warning("task decode failed: %s", e)
        raise DeserializationError(f"Invalid task payload: {e}") from e

    logger.debug("decoded task id=%s", task.id)
    return task


def decode_tasks(data: bytes | str) -> list[Task]:
    """Parse a JSON array of read-model objects."""
    try:
        tasks = _TASK_LIST.validate_json(data)
    except PydanticValidationError as e:
        logger.warning("task list decode failed: %s", e)
        raise DeserializationError(f"Invalid task list payload: {e}") from e

    logger.debug("decoded %d tasks", len(tasks))
    return tasks


def task_from_wire(obj: dict[str, Any]) -> Task:
    """Build a Task from an already-parsed read-model object."""
    try:
        return Task.model_validate(obj)
    except PydanticValidationError as e:
        logger.warning("task decode failed: %s", e)
        raise DeserializationError(f"Invalid task payload: {e}") from e


def _due_fields(form: DueForm) -> dict[str, str]:
    match form:
        case DateTime(datetime=value):
            return {"due_datetime": value}
        case DateOnly(date=value):
            return {"due_date": value}
        case StringOnly(string=value):
            return {"due_string": value, "due_lang": DUE_LANG}
        case NoDue():
            return {}
    raise TypeError(f"unknown due form: {form!r}")


def to_write_model(task: Task) -> TaskWrite:
    """Project a Task onto the write schema."""
    form = resolve_due(task.due)
    logger.debug("encoding task id=%s with due form %s", task.id, type(form).__name__)
    return TaskWrite(
        content=task.content,
        project_id=task.project_id,
        order=task.order,
        label_ids=list(task.label_ids),
        priority=task.priority,
        **_due_fields(form),
    )


def task_to_wire(task: Task) -> dict[str, Any]:
    """Write-schema object for a Task, ready for a JSON body."""
    return to_write_model(task).model_dump(exclude_unset=True)


def encode_task(task: Task) -> bytes:
    """Serialize a Task to write-schema JSON bytes."""
    return to_write_model(task).model_dump_json(exclude_unset=True).encode("utf-8")
