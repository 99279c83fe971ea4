"""Todoist transport package."""

from .client import TodoistClient, TodoistClientProtocol

__all__ = [
    "TodoistClient",
    "TodoistClientProtocol",
]
