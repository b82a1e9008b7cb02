from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from taskmanager.core.database import get_db
from taskmanager.models.user import User
from taskmanager.routers.deps import get_current_user
from taskmanager.schemas.pagination import PagedResponse
from taskmanager.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskmanager.services import task_service

router = APIRouter(prefix="/projects/{project_id}/tasks", tags=["tasks"])


@router.get("", response_model=PagedResponse[TaskResponse])
def list_tasks(
    project_id: int,
    page: int = Query(1),
    page_size: int = Query(10, alias="pageSize"),
    search: Optional[str] = Query(None),
    completed: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return task_service.list_tasks(
        db, project_id, current_user.id, page, page_size, search=search, is_completed=completed
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    project_id: int,
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return task_service.get_task(db, task_id, project_id, current_user.id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    project_id: int,
    task_data: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return task_service.create_task(db, project_id, task_data, current_user.id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    project_id: int,
    task_id: int,
    task_data: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return task_service.update_task(db, task_id, project_id, task_data, current_user.id)


@router.patch("/{task_id}/toggle", response_model=TaskResponse)
def toggle_task(
    project_id: int,
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return task_service.toggle_task(db, task_id, project_id, current_user.id)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    project_id: int,
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    task_service.delete_task(db, task_id, project_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
