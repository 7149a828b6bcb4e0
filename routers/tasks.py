# routers/tasks.py
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from starlette.status import (
    HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND
)

from dependencies import get_projects, get_tasks, project_id_param, task_id_param
from storage import JsonCollection, next_id

# --- Router Setup ---
router = APIRouter(
    prefix="/projects/{projectId}/tasks",
    tags=["Task Management"],
)

# --- Constants ---
VALID_PRIORITIES = ["high", "medium", "low"]
VALID_STATUSES = ["not-started", "in-progress", "done"]
UPDATABLE_FIELDS = ["title", "description", "priority", "dueDate", "status"]

# --- Data Models ---
class TaskCreateRequest(BaseModel):
    pjId: Any = None
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    dueDate: Optional[str] = None
    status: Optional[str] = None

class TaskUpdateRequest(BaseModel):
    title: Any = None
    description: Any = None
    priority: Any = None
    dueDate: Any = None
    status: Any = None

# --- Helpers ---

def _is_matching_project_id(pj_id: Any, project_id: Optional[int]) -> bool:
    # bool is an int subclass; `true` must not match project 1
    if isinstance(pj_id, bool):
        return False
    if isinstance(pj_id, float) and not pj_id.is_integer():
        return False
    if not isinstance(pj_id, (int, float)):
        return False
    return pj_id == project_id

def _find_task(all_tasks, project_id, task_id):
    return next(
        (t for t in all_tasks if t["pjId"] == project_id and t["id"] == task_id),
        None,
    )

# --- Endpoints ---

@router.post("", status_code=HTTP_201_CREATED)
async def create_task(
    request: Optional[TaskCreateRequest] = None,
    project_id: Optional[int] = Depends(project_id_param),
    tasks: JsonCollection = Depends(get_tasks),
    projects: JsonCollection = Depends(get_projects),
):
    """
    Creates a task under a project and links it from the project's task list.
    The task file is written before the project file, so a missing project
    still leaves the new task record behind.
    """
    if request is None:
        request = TaskCreateRequest()

    if not _is_matching_project_id(request.pjId, project_id):
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Project ID in URL and body must match.")

    required = [request.title, request.description, request.priority, request.dueDate, request.status]
    if not all(required):
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail="Title, description, priority, dueDate and status are required."
        )

    if request.priority not in VALID_PRIORITIES:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail=f"Priority must be one of the following: {', '.join(VALID_PRIORITIES)}."
        )

    if request.status not in VALID_STATUSES:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail=f"Status must be one of the following: {', '.join(VALID_STATUSES)}."
        )

    all_tasks = tasks.read()
    new_task = {
        "pjId": project_id,
        "id": next_id(all_tasks),
        "title": request.title,
        "description": request.description,
        "priority": request.priority,
        "dueDate": request.dueDate,
        "status": request.status,
    }
    all_tasks.append(new_task)
    tasks.write(all_tasks)

    all_projects = projects.read()
    project = next((p for p in all_projects if p["id"] == project_id), None)
    if not project:
        print(f"Task {new_task['id']} was saved but project {project_id} does not exist; task is orphaned.")
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Project not found.")

    project["tasks"].append(new_task["id"])
    projects.write(all_projects)
    return new_task

@router.get("")
async def list_tasks(
    project_id: Optional[int] = Depends(project_id_param),
    tasks: JsonCollection = Depends(get_tasks),
):
    """Get the list of all tasks belonging to a project."""
    return [t for t in tasks.read() if t["pjId"] == project_id]

@router.put("/{taskId}")
async def update_task(
    request: Optional[TaskUpdateRequest] = None,
    project_id: Optional[int] = Depends(project_id_param),
    task_id: Optional[int] = Depends(task_id_param),
    tasks: JsonCollection = Depends(get_tasks),
):
    """Overwrites the fields present in the body. Values are stored as given."""
    all_tasks = tasks.read()
    task = _find_task(all_tasks, project_id, task_id)
    if not task:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Task not found.")

    changes = request.model_dump(exclude_unset=True) if request is not None else {}
    for field in UPDATABLE_FIELDS:
        if field in changes:
            task[field] = changes[field]

    tasks.write(all_tasks)
    return task

@router.delete("/{taskId}")
async def delete_task(
    project_id: Optional[int] = Depends(project_id_param),
    task_id: Optional[int] = Depends(task_id_param),
    tasks: JsonCollection = Depends(get_tasks),
    projects: JsonCollection = Depends(get_projects),
):
    """Deletes a task and drops its id from the owning project's task list."""
    all_tasks = tasks.read()
    task_to_delete = _find_task(all_tasks, project_id, task_id)
    if not task_to_delete:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Task not found.")

    remaining_tasks = [t for t in all_tasks if t is not task_to_delete]
    tasks.write(remaining_tasks)

    all_projects = projects.read()
    project = next((p for p in all_projects if p["id"] == project_id), None)
    if project and task_id in project["tasks"]:
        project["tasks"] = [t for t in project["tasks"] if t != task_id]
        projects.write(all_projects)

    return {"message": "Task successfully deleted."}
