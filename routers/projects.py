# routers/projects.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from starlette.status import (
    HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND
)

from dependencies import get_projects, project_id_param
from storage import JsonCollection, next_id

# --- Router Setup ---
router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
)

# --- Data Models ---
class ProjectCreateRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None

# --- Endpoints ---

@router.post("", status_code=HTTP_201_CREATED)
async def create_project(
    request: Optional[ProjectCreateRequest] = None,
    projects: JsonCollection = Depends(get_projects),
):
    """Creates a new project with an empty task list."""
    if request is None or not request.title or not request.description:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Title and description are required.")

    all_projects = projects.read()
    new_project = {
        "id": next_id(all_projects),
        "title": request.title,
        "description": request.description,
        "tasks": [],
    }
    all_projects.append(new_project)
    projects.write(all_projects)
    return new_project

@router.get("")
async def list_projects(projects: JsonCollection = Depends(get_projects)):
    """Returns every project as stored."""
    return projects.read()

@router.get("/{projectId}")
async def get_project(
    project_id: Optional[int] = Depends(project_id_param),
    projects: JsonCollection = Depends(get_projects),
):
    project = next((p for p in projects.read() if p["id"] == project_id), None)
    if not project:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Project not found.")
    return project

@router.delete("/{projectId}")
async def delete_project(
    project_id: Optional[int] = Depends(project_id_param),
    projects: JsonCollection = Depends(get_projects),
):
    """Deletes a project. Only projects without tasks can be deleted."""
    all_projects = projects.read()
    project_to_delete = next((p for p in all_projects if p["id"] == project_id), None)

    if not project_to_delete:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Project not found.")

    if project_to_delete["tasks"]:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Cannot delete project because it has tasks.")

    remaining_projects = [p for p in all_projects if p["id"] != project_id]
    projects.write(remaining_projects)
    return {"message": "Project successfully deleted."}
