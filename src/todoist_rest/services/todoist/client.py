"""Todoist REST client for tasks.

Defines a Protocol for testability and a thin implementation backed by
httpx. Authentication headers are supplied by the caller and passed
through untouched.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

from todoist_rest.exceptions import TaskNotCreatedError
from todoist_rest.models.config_models import APIConfig
from todoist_rest.models.task import Task
from todoist_rest.services.codec import decode_task, decode_tasks, encode_task

logger = logging.getLogger(__name__)

_BASE_URL = "https://beta.todoist.com/API/v8"
_DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class TodoistClientProtocol(Protocol):
    """Abstract interface for exchanging tasks with Todoist."""

    async def get_tasks(self) -> list[Task]:
        """Return all active tasks."""
        ...

    async def get_task(self, task_id: int) -> Task:
        """Return a single task by id."""
        ...

    async def create_task(self, task: Task) -> Task:
        """Create a task and return the stored version."""
        ...

    async def update_task(self, task: Task) -> None:
        """Send the writable fields of an existing task."""
        ...


class TodoistClient:
    """Todoist REST client using httpx.

    Args:
        base_url: Override API base URL (useful for testing).
        timeout: HTTP request timeout in seconds.
        headers: Extra headers sent with every request.
    """

    def __init__(
        self,
        *,
        base_url: str = _BASE_URL,
        timeout: float = _DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._headers = {"Content-Type": "application/json", **(headers or {})}
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @classmethod
    def from_config(
        cls, config: APIConfig, *, headers: dict[str, str] | None = None
    ) -> TodoistClient:
        return cls(base_url=config.endpoint, timeout=config.timeout, headers=headers)

    async def get_tasks(self) -> list[Task]:
        response = await self._request("GET", "/tasks")
        return decode_tasks(response.content)

    async def get_task(self, task_id: int) -> Task:
        response = await self._request("GET", f"/tasks/{task_id}")
        return decode_task(response.content)

    async def create_task(self, task: Task) -> Task:
        """Create *task* remotely; the returned Task carries server-assigned fields."""
        response = await self._request("POST", "/tasks", content=encode_task(task))
        return decode_task(response.content)

    async def update_task(self, task: Task) -> None:
        """Update an existing task.

        Raises:
            TaskNotCreatedError: If the task has not been created remotely yet
        """
        if task.id is None:
            raise TaskNotCreatedError("Cannot update a task without an id; create it first.")
        await self._request("POST", f"/tasks/{task.id}", content=encode_task(task))

    async def close_task(self, task_id: int) -> None:
        await self._request("POST", f"/tasks/{task_id}/close")

    async def reopen_task(self, task_id: int) -> None:
        await self._request("POST", f"/tasks/{task_id}/reopen")

    async def delete_task(self, task_id: int) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")

    async def _request(
        self,
        method: str,
        path: str,
        content: bytes | None = None,
    ) -> httpx.Response:
        """Execute a request, raising descriptive errors on failure."""
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.request(method, url, headers=self._headers, content=content)

        if response.status_code == 403:
            raise PermissionError("Insufficient permissions for the requested resource.")
        response.raise_for_status()
        return response
