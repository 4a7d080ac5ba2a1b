from fastapi import APIRouter, Depends, HTTPException
from typing import List
from focushub.app.schemas.task_schemas import TaskCreate, TaskUpdate, TaskResponse
from focushub.app.schemas.base_schemas import MessageResponse
from focushub.data_layer.repos.task_repo import TaskRepository
from focushub.data_layer.models.task_model import Task
from focushub.api.dependencies import get_task_repo
from focushub.api.route_utils import get_owned_or_404
from focushub.utils.auth import get_current_user_id
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=List[TaskResponse])
def list_tasks(user_id: str = Depends(get_current_user_id),
               task_repo: TaskRepository = Depends(get_task_repo)):
    try:
        tasks = task_repo.find_by_user(user_id)
    except Exception as e:
        logger.error(f"Error fetching tasks: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")
    return [TaskResponse(**t.model_dump()) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, user_id: str = Depends(get_current_user_id),
             task_repo: TaskRepository = Depends(get_task_repo)):
    task = get_owned_or_404(task_repo, task_id, user_id, "Task")
    return TaskResponse(**task.model_dump())


@router.post("", response_model=TaskResponse)
def create_task(task: TaskCreate, user_id: str = Depends(get_current_user_id),
                task_repo: TaskRepository = Depends(get_task_repo)):
    task_data = task.model_dump()
    task_data["user_id"] = user_id
    new_task = Task(**task_data)
    if new_task.status == "completed":
        new_task.completed_at = new_task.created_at
    task_id = task_repo.create_task(new_task)
    created = task_repo.find_by_id(task_id)
    if not created:
        raise HTTPException(status_code=500, detail="Task creation failed")
    logger.info(f"Created task {task_id} for user {user_id}")
    return TaskResponse(**created.model_dump())


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: str, task: TaskUpdate, user_id: str = Depends(get_current_user_id),
                task_repo: TaskRepository = Depends(get_task_repo)):
    get_owned_or_404(task_repo, task_id, user_id, "Task")
    updated = task_repo.update_task(task_id, task.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Task not found")
    logger.info(f"Updated task {task_id}")
    return TaskResponse(**updated.model_dump())


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: str, user_id: str = Depends(get_current_user_id),
                task_repo: TaskRepository = Depends(get_task_repo)):
    get_owned_or_404(task_repo, task_id, user_id, "Task")
    if not task_repo.delete_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    logger.info(f"Deleted task {task_id}")
    return MessageResponse(message="Task deleted successfully")
