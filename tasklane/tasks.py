"""Storage and service layer for tasks."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from tasklane.models import Task


def _commit(session: Session) -> None:
    try:
        session.commit()
    except Exception:
        session.rollback()
        raise


class TaskRepository:
    """Reads and writes tasks through a database session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[Task]:
        """Return every task, ordered by id."""
        return list(self._session.scalars(select(Task).order_by(Task.id)))

    def find_by_user_id(self, user_id: int) -> list[Task]:
        """Return the tasks of one user, ordered by id."""
        query = select(Task).where(Task.user_id == user_id).order_by(Task.id)
        return list(self._session.scalars(query))

    def find_by_id(self, task_id: int) -> Task | None:
        """Return the task with this id, or None when there is none."""
        task = self._session.get(Task, task_id)
        if task is None:
            print("Not found")
        return task

    def delete_by_id(self, task_id: int) -> None:
        """Delete the task with this id; a missing id is not an error."""
        self._session.execute(delete(Task).where(Task.id == task_id))
        _commit(self._session)

    def create(self, task: Task) -> None:
        """Store a new task, filling in its id and defaults."""
        self._session.add(task)
        _commit(self._session)
        self._session.refresh(task)

    def toggle_task(self, task_id: int) -> None:
        """Switch a task between pending and finished.

        Raises LookupError when no task has this id.
        """
        task = self._session.get(Task, task_id)
        if task is None:
            print("Not found")
            raise LookupError(f"task {task_id} not found")
        task.status = "finished" if task.status == "pending" else "pending"
        _commit(self._session)


class TaskService:
    """Task operations on top of a repository."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def get_by_user_id(self, user_id: int) -> list[Task]:
        """Return the tasks of one user."""
        return self._repository.find_by_user_id(user_id)

    def get_by_id(self, task_id: int) -> Task | None:
        """Return one task, or None when there is none."""
        return self._repository.find_by_id(task_id)

    def get_all_tasks(self) -> list[Task]:
        """Return every task."""
        return self._repository.find_all()

    def create(self, user_id: int, title: str, description: str) -> Task:
        """Create and store a task for a user."""
        task = Task(user_id=user_id, title=title, des=description)
        self._repository.create(task)
        return task

    def delete_by_id(self, task_id: int) -> None:
        """Delete one task."""
        self._repository.delete_by_id(task_id)

    def toggle(self, task_id: int) -> None:
        """Switch a task between pending and finished."""
        self._repository.toggle_task(task_id)