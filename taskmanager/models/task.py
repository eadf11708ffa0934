"""Task model."""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, Text, TypeDecorator
from sqlalchemy.orm import Mapped, mapped_column

from taskmanager.extensions import db


class UTCDateTime(TypeDecorator):
    """DateTime column that always hands back timezone-aware UTC values.

    Backends such as SQLite drop the offset on write, so values are stored
    in UTC and the offset is re-attached on read.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Task(db.Model):
    """A single tracked task.

    ``id``, ``created_at`` and ``updated_at`` stay unset until the task is
    first saved through :class:`taskmanager.services.TaskStore`.
    """

    __tablename__ = "tasks"
    # Stop SQLite from handing out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    # SQLite only autoincrements a column declared exactly INTEGER
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(UTCDateTime(timezone=True))
    updated_at: Mapped[datetime | None] = mapped_column(UTCDateTime(timezone=True))

    def __init__(self, **kwargs) -> None:
        # Column defaults only apply at INSERT time
        kwargs.setdefault("completed", False)
        super().__init__(**kwargs)

    def _values(self) -> tuple:
        return (
            self.id,
            self.title,
            self.description,
            self.completed,
            self.created_at,
            self.updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self._values() == other._values()

    # Mutable record: equality is by value, so instances are unhashable
    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"<Task id={self.id} title={self.title!r} "
            f"description={self.description!r} completed={self.completed}>"
        )
