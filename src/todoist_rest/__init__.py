"""Todoist REST task models and wire codec."""

import logging

from .exceptions import (
    DeserializationError,
    TaskNotCreatedError,
    TodoistRestError,
    ValidationError,
)
from .models import Due, Task
from .services.codec import decode_task, decode_tasks, encode_task
from .utils.logger import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Due",
    "Task",
    "decode_task",
    "decode_tasks",
    "encode_task",
    "configure_logging",
    "TodoistRestError",
    "DeserializationError",
    "ValidationError",
    "TaskNotCreatedError",
]
