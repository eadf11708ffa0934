"""Persistence of Task records."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskmanager.models import Task


logger = logging.getLogger(__name__)

# Range of a signed 64-bit BIGINT id column
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """Create, read, update and delete tasks in the ``tasks`` table.

    The store owns timestamp management: ``created_at`` is set once on the
    first save and ``updated_at`` is refreshed on every save.

    Args:
        session: SQLAlchemy session (or scoped session) to work through.
        clock: Returns the current time as an aware UTC datetime.
    """

    def __init__(self, session: Session, clock: Callable[[], datetime] = utcnow) -> None:
        self.session = session
        self.clock = clock

    def save(self, task: Task) -> Task:
        """Insert a new task or update an existing one.

        Args:
            task: Task to persist. Tasks without an ``id`` are inserted.

        Returns:
            The persisted task, with ``id`` and timestamps populated.

        Raises:
            SQLAlchemyError: If the database rejects the write.
        """
        now = self.clock()

        if task.id is None:
            task.created_at = now
            task.updated_at = now
            self.session.add(task)
        else:
            if task not in self.session:
                task = self.session.merge(task)
            if task.created_at is None:
                task.created_at = now
            task.updated_at = now

        self._commit()
        logger.debug(f"Task saved: {task.id}")
        return task

    def find_by_id(self, task_id: int) -> Task | None:
        """Return the task with ``task_id``, or None if there is none."""
        if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
            return None
        return self.session.get(Task, task_id)

    def find_all(self) -> list[Task]:
        """Return every task in insertion order."""
        return list(self.session.scalars(select(Task).order_by(Task.id)))

    def exists_by_id(self, task_id: int) -> bool:
        return self.find_by_id(task_id) is not None

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(Task))

    def delete(self, task: Task) -> None:
        """Delete a task that was previously loaded or saved."""
        task_id = task.id
        self.session.delete(task)
        self._commit()
        logger.debug(f"Task deleted: {task_id}")

    def delete_by_id(self, task_id: int) -> bool:
        """Delete the task with ``task_id``.

        Returns:
            True if a task was deleted, False if none matched.
        """
        task = self.find_by_id(task_id)
        if task is None:
            return False
        self.delete(task)
        return True

    def delete_all(self) -> int:
        """Delete every task and return how many were removed."""
        result = self.session.execute(delete(Task))
        self._commit()
        return result.rowcount

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
