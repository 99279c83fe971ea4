"""Custom exceptions for todoist_rest."""


class TodoistRestError(Exception):
    """Base exception for all todoist_rest errors."""


class DeserializationError(TodoistRestError):
    """Raised when a wire payload is malformed or misses a required field."""


class ValidationError(TodoistRestError, ValueError):
    """Raised when a mutator receives a value outside its domain."""


class TaskNotCreatedError(TodoistRestError, ValueError):
    """Raised when an operation needs a task the service has not assigned an id to yet."""
