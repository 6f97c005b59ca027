import logging
import re
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query

from ..core.config import Settings, get_app_settings
from ..core.store import TaskStore, get_store
from ..models.task import Task
from ..schemas.task import TaskInput, TaskResponse, TaskList, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Task not found"}}


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a string, None when there is none"""
    if value is None:
        return None

    match = LEADING_INT.match(value)
    if not match:
        return None

    try:
        return int(match.group(1))
    except ValueError:
        # Too many digits to convert
        return None


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse a positive integer, falling back to default for anything else"""
    number = parse_int(value)
    if number is None or number < 1:
        return default
    return number


def task_not_found(task_id: str) -> HTTPException:
    logger.info(f"Task {task_id!r} not found")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Task not found"
    )


def to_response(task: Task) -> TaskResponse:
    return TaskResponse.model_validate(task)


@router.get("", response_model=TaskList)
async def list_tasks(
    completed: Optional[str] = Query(None, description="Filter by completion status ('true' or 'false')"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="Field to sort by ('title')"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Number of tasks per page"),
    store: TaskStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings)
):
    """List tasks with optional filtering, sorting and pagination"""
    # Empty values behave as if the parameter was absent
    completed_filter = completed == "true" if completed else None
    page_number = parse_positive_int(page, 1)
    page_size = parse_positive_int(limit, settings.default_page_size)

    tasks, total = store.list(
        completed=completed_filter,
        sort_by=sort_by,
        page=page_number,
        limit=page_size,
    )

    return TaskList(
        tasks=[to_response(task) for task in tasks],
        page=page_number,
        limit=page_size,
        total=total
    )


@router.get("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Get a specific task by ID"""
    task = store.get(parse_int(task_id))

    if not task:
        raise task_not_found(task_id)

    return to_response(task)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: Optional[TaskInput] = None,
    store: TaskStore = Depends(get_store)
):
    """Create a new task"""
    if task_data is None:
        task_data = TaskInput()
    task = store.create(title=task_data.title, completed=task_data.completed)
    logger.info(f"Task {task.id} created")
    return to_response(task)


@router.put("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
async def replace_task(
    task_id: str,
    task_data: Optional[TaskInput] = None,
    store: TaskStore = Depends(get_store)
):
    """Replace a task, keeping the ID from the path"""
    if task_data is None:
        task_data = TaskInput()
    task = store.replace(parse_int(task_id), title=task_data.title, completed=task_data.completed)

    if not task:
        raise task_not_found(task_id)

    logger.info(f"Task {task.id} replaced")
    return to_response(task)


@router.delete("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a task and return it"""
    task = store.delete(parse_int(task_id))

    if not task:
        raise task_not_found(task_id)

    logger.info(f"Task {task.id} deleted")
    return to_response(task)
