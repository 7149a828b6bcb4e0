# dependencies.py
from typing import Optional

from storage import JsonCollection, projects_collection, tasks_collection


def parse_id(value: str) -> Optional[int]:
    """
    Parses a numeric id from a path segment.
    A segment that is not an integer yields None, which matches no record.
    """
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_projects() -> JsonCollection:
    """
    Resolves the projects collection for the current request.
    This runs on each request, so a changed DATA_DIR is picked up immediately.
    """
    return projects_collection()


def get_tasks() -> JsonCollection:
    """Resolves the tasks collection for the current request."""
    return tasks_collection()


async def project_id_param(projectId: str) -> Optional[int]:
    return parse_id(projectId)


async def task_id_param(taskId: str) -> Optional[int]:
    return parse_id(taskId)
