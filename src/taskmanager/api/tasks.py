"""Tasks API endpoints."""

from __future__ import annotations

from typing import Any

from taskmanager.api.client import APIClient


class TasksAPI:
    """Tasks API client.

    Args:
        client: Underlying HTTP client
        prefix: Path prefix the server mounts the task routes under
    """

    def __init__(self, client: APIClient, prefix: str = ""):
        self.client = client
        self.base_path = f"{prefix.rstrip('/')}/tasks"

    async def list_tasks(
        self,
        *,
        status: str | None = None,
        due_before: str | None = None,
        due_from: str | None = None,
        due_to: str | None = None,
    ) -> list[dict]:
        """List tasks, optionally through one derived filter."""
        params: dict[str, Any] = {}
        if status:
            params["status"] = status
        if due_before:
            params["dueBefore"] = due_before
        if due_from:
            params["dueFrom"] = due_from
        if due_to:
            params["dueTo"] = due_to

        response = await self.client.get(self.base_path, params=params or None)
        return response.json()

    async def get_task(self, task_id: int) -> dict:
        response = await self.client.get(f"{self.base_path}/{task_id}")
        return response.json()

    async def create_task(
        self,
        title: str,
        *,
        status: str = "TODO",
        description: str | None = None,
        due_date: str | None = None,
    ) -> dict:
        """Create a new task."""
        data = {
            "title": title,
            "description": description,
            "status": status,
            "dueDate": due_date,
        }
        response = await self.client.post(self.base_path, json=data)
        return response.json()

    async def update_task(
        self,
        task_id: int,
        *,
        title: str,
        status: str,
        description: str | None = None,
        due_date: str | None = None,
    ) -> dict:
        """Replace a task. Omitted description and due date are cleared."""
        data = {
            "title": title,
            "description": description,
            "status": status,
            "dueDate": due_date,
        }
        response = await self.client.put(f"{self.base_path}/{task_id}", json=data)
        return response.json()

    async def delete_task(self, task_id: int) -> None:
        await self.client.delete(f"{self.base_path}/{task_id}")
