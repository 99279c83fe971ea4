"""Task data models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from todoist_rest.exceptions import ValidationError

PRIORITIES = (1, 2, 3, 4)

PositiveId = Annotated[StrictInt, Field(gt=0)]


class Due(BaseModel):
    """Information about when a task is due.

    The human-readable ``string`` is always present. ``date`` (YYYY-MM-DD) is set for
    whole-day tasks, ``datetime`` (RFC3339, UTC) when an exact time is known, and
    ``timezone`` only accompanies server-provided datetimes. Informational read-model
    keys such as ``recurring`` are dropped on parse.

    Setting one form clears the others, and the structured setters mirror their value
    into ``string`` so the display text never goes stale.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    string: StrictStr
    date: StrictStr | None = None
    datetime: StrictStr | None = None
    timezone: StrictStr | None = None

    @classmethod
    def create(cls, string: str) -> Due:
        """Create due information from a free-text description (e.g. "tomorrow at noon")."""
        return cls(string=string)

    def set_string(self, string: str) -> None:
        """Set the human-defined due description; clears date, datetime and timezone."""
        self.string = string
        self.date = None
        self.datetime = None
        self.timezone = None

    def set_date(self, date: str) -> None:
        """Set a whole-day due date (YYYY-MM-DD), mirrored into ``string``."""
        self.string = date
        self.date = date
        self.datetime = None
        self.timezone = None

    def set_datetime(self, datetime: str) -> None:
        """Set an exact due time (RFC3339 in UTC), mirrored into ``string``."""
        self.string = datetime
        self.date = None
        self.datetime = datetime
        self.timezone = None


class Task(BaseModel):
    """Task model mapping the remote read schema.

    Attributes:
        id: Task identifier, assigned by the service (read-only)
        project_id: Owning project; None means the default project
        content: The task content
        completed: Flag to mark completed tasks
        label_ids: Label identifiers in display order (duplicates allowed)
        order: Position among sibling tasks (read-only)
        indent: Indentation level from 1 to 5 (read-only)
        priority: Priority from 1 (normal) to 4 (urgent)
        due: When the task is due, if at all
        url: Link to the task in the web interface (read-only)
        comment_count: Number of task comments (read-only)
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: PositiveId | None = Field(default=None, frozen=True)
    project_id: PositiveId | None = None
    content: StrictStr
    completed: StrictBool
    label_ids: list[StrictInt]
    order: StrictInt | None = Field(default=None, frozen=True)
    indent: StrictInt | None = Field(default=None, ge=1, le=5, frozen=True)
    priority: StrictInt = Field(ge=1, le=4)
    due: Due | None = None
    url: StrictStr | None = Field(default=None, frozen=True)
    comment_count: StrictInt | None = Field(default=None, ge=0, frozen=True)

    @classmethod
    def create(cls, content: str, project_id: int | None = None) -> Task:
        """Create a new, not yet persisted task with default settings."""
        return cls(
            content=content,
            project_id=project_id,
            completed=False,
            label_ids=[],
            priority=1,
        )

    def set_content(self, content: str) -> None:
        self.content = content

    def set_completed(self, completed: bool) -> None:
        self.completed = completed

    def set_priority(self, priority: int) -> None:
        """Set the priority from 1 (normal) to 4 (urgent).

        Raises:
            ValidationError: If the value is not one of 1, 2, 3 or 4
        """
        if isinstance(priority, bool) or priority not in PRIORITIES:
            raise ValidationError(f"The priority must be a value from 1 to 4, got {priority!r}")
        self.priority = priority

    def add_label_id(self, label_id: int) -> None:
        """Associate a label, appending it after the existing ones.

        Raises:
            ValidationError: If the label id is not an integer
        """
        if isinstance(label_id, bool) or not isinstance(label_id, int):
            raise ValidationError(f"The label id must be an integer, got {label_id!r}")
        self.label_ids.append(label_id)

    def remove_label_id(self, label_id: int) -> None:
        """Remove every association of a label, keeping the order of the rest."""
        self.label_ids = [lid for lid in self.label_ids if lid != label_id]

    def set_due(self, due: Due | None) -> None:
        """Replace the due information; None clears it."""
        self.due = due
