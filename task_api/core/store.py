"""
In-memory task store for Task API.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from fastapi import Request

from ..models.task import Task

logger = logging.getLogger(__name__)

SEED_TASKS = (
    Task(id=1, title="Task 1", completed=False),
    Task(id=2, title="Task 2", completed=True),
    Task(id=3, title="Task 3", completed=False),
)


class TaskStore:
    """Ordered, process-local collection of tasks"""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = [
            Task(id=task.id, title=task.title, completed=task.completed)
            for task in (SEED_TASKS if tasks is None else tasks)
        ]
        # Deleted ids are never handed out again
        self._next_id = max((task.id for task in self._tasks), default=0) + 1

    def __len__(self) -> int:
        return len(self._tasks)

    def all(self) -> List[Task]:
        """Return a shallow copy of the tasks in store order."""
        return list(self._tasks)

    def list(
        self,
        completed: Optional[bool] = None,
        sort_by: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Task], int]:
        """
        Filter, sort and paginate tasks.

        Sorting works on a copy, so the store order is left untouched.
        Titles that differ only in case put lowercase first.

        Args:
            completed: keep only tasks with this completion flag
            sort_by: "title" to sort by case-insensitive title
            page: 1-based page number
            limit: page size

        Returns:
            tuple: (tasks on the requested page, filtered total)
        """
        tasks = self.all()

        if completed is not None:
            tasks = [task for task in tasks if task.completed is completed]

        if sort_by == "title":
            # Lowercase sorts before uppercase when titles differ only in case
            tasks.sort(key=lambda task: (task.title.casefold(), task.title.swapcase()))

        total = len(tasks)
        start = (page - 1) * limit
        end = page * limit
        return tasks[start:end], total

    def _index_of(self, task_id: Optional[int]) -> int:
        if task_id is None:
            return -1
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return -1

    def get(self, task_id: Optional[int]) -> Optional[Task]:
        """Return the first task with the given id, or None."""
        index = self._index_of(task_id)
        return self._tasks[index] if index != -1 else None

    def create(self, title: str = "", completed: bool = False) -> Task:
        """Append a new task with the next free id."""
        task = Task(id=self._next_id, title=title, completed=completed)
        self._next_id += 1
        self._tasks.append(task)
        logger.debug(f"Created task {task.to_dict()}")
        return task

    def replace(self, task_id: Optional[int], title: str = "", completed: bool = False) -> Optional[Task]:
        """Overwrite the task with the given id, keeping its position."""
        index = self._index_of(task_id)
        if index == -1:
            return None

        task = Task(id=task_id, title=title, completed=completed)
        self._tasks[index] = task
        logger.debug(f"Replaced task {task.to_dict()}")
        return task

    def delete(self, task_id: Optional[int]) -> Optional[Task]:
        """Remove and return the task with the given id."""
        index = self._index_of(task_id)
        if index == -1:
            return None

        task = self._tasks.pop(index)
        logger.debug(f"Deleted task {task.to_dict()}")
        return task


def get_store(request: Request) -> TaskStore:
    """
    Task store dependency for FastAPI

    Returns:
        TaskStore: Store owned by the running application
    """
    return request.app.state.store
