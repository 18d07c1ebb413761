from enum import IntEnum

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tasktracker.database.base import Base, BigIntId


# ------------------------------
# Task hierarchy and status enums
# ------------------------------
class TaskLevel(IntEnum):
    """Fixed three-tier hierarchy. Only the deepest tier (the leaf) takes assignments and comments."""

    MAJOR = 0
    MINOR = 1
    TRIVIAL = 2

    @classmethod
    def leaf(cls) -> "TaskLevel":
        return max(cls)


class TaskStatus(IntEnum):
    NOT_STARTED = 0
    IN_PROGRESS = 1
    REVIEWING = 2
    CANCELLED = 3
    DONE = 4

    @property
    def short_code(self) -> str:
        return _STATUS_SHORT_CODES[self]

    @classmethod
    def from_short_code(cls, code: str) -> "TaskStatus":
        for status, short in _STATUS_SHORT_CODES.items():
            if short == code:
                return status
        raise ValueError(f"unknown task status code: {code!r}")


_STATUS_SHORT_CODES = {
    TaskStatus.NOT_STARTED: "ns",
    TaskStatus.IN_PROGRESS: "ip",
    TaskStatus.REVIEWING: "rv",
    TaskStatus.CANCELLED: "cn",
    TaskStatus.DONE: "dn",
}


# ------------------------------
# Task Model
# ------------------------------
class Task(Base):
    """
    SQLAlchemy model representing a task.

    level 0 tasks are roots; a level L task (L > 0) hangs under a level L-1
    parent in the same table. Timestamps are unix epoch seconds.
    """

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)

    project_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("projects.id"), nullable=False, index=True
    )

    # Parent task, required for every level above MAJOR
    parent_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("tasks.id"), nullable=True, index=True
    )

    # TaskLevel value (0..2)
    level: Mapped[int] = mapped_column(Integer, nullable=False)

    name: Mapped[str] = mapped_column(String(128), nullable=False)

    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # TaskStatus value (0..4)
    status: Mapped[int] = mapped_column(Integer, nullable=False)

    deadline: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    updated_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    @property
    def status_code(self) -> str | None:
        """Short status code (ns, ip, rv, cn, dn), or None for an unset or unknown status."""
        try:
            return TaskStatus(self.status).short_code
        except ValueError:
            return None

    def __repr__(self) -> str:
        return (
            f"<Task(id={self.id!r}, project_id={self.project_id!r}, parent_id={self.parent_id!r}, "
            f"level={self.level!r}, status={self.status_code!r}, name={self.name!r})>"
        )
