"""todoist_rest domain models.

Pydantic models for tasks and their due information as exchanged with the
remote task service, plus the narrower write-schema payload and configuration.
"""

from .config_models import APIConfig, AppConfig, LoggingConfig
from .task import Due, Task
from .wire import DateOnly, DateTime, DueForm, NoDue, StringOnly, TaskWrite, resolve_due

__all__ = [
    # Task models
    "Due",
    "Task",
    # Write schema
    "TaskWrite",
    "DueForm",
    "NoDue",
    "StringOnly",
    "DateOnly",
    "DateTime",
    "resolve_due",
    # Config models
    "AppConfig",
    "APIConfig",
    "LoggingConfig",
]
