from fastapi import APIRouter, Depends, status, Query
from typing import Optional, List

from ..schemas import TaskCreate, TaskFilters, TaskRead, TaskUpdate
from ..services import TaskService
from .deps import get_task_service

router = APIRouter()


@router.post("/tasks", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)):
    return service.create_task(task)


@router.get("/tasks", response_model=List[TaskRead])
def get_tasks(
    status: Optional[List[str]] = Query(None, description="Comma-separated statuses"),
    priority: Optional[List[str]] = Query(None, description="Comma-separated priorities"),
    search: Optional[str] = Query(None, description="Case-insensitive substring of title or description"),
    service: TaskService = Depends(get_task_service),
):
    """List tasks, optionally narrowed by status, priority and search text.

    Without any filter parameter the unfiltered listing is returned; blank
    parameters such as ``?status=`` impose no constraint.
    """
    if status is None and priority is None and search is None:
        return service.get_tasks_with_filters(None)
    filters = TaskFilters.from_query(status=status, priority=priority, search=search)
    return service.get_tasks_with_filters(filters)


@router.get("/tasks/{task_id}", response_model=TaskRead)
def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    return service.get_task(task_id)


@router.patch("/tasks/{task_id}", response_model=TaskRead)
def update_task(
    task_id: int, task_update: TaskUpdate, service: TaskService = Depends(get_task_service)
):
    return service.update_task(task_id, task_update)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    service.delete_task(task_id)
