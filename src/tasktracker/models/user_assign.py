from sqlalchemy import BigInteger, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tasktracker.database.base import Base, BigIntId


class UserAssign(Base):
    """
    Assignment of a user to a leaf-level task.

    The (user_id, task_id) unique constraint is the authoritative duplicate
    check; the repository's pre-check only produces a friendlier error first.
    """

    __tablename__ = "user_assign"
    __table_args__ = (UniqueConstraint("user_id", "task_id"),)

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id"), nullable=False, index=True
    )

    task_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("tasks.id"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<UserAssign(id={self.id!r}, user_id={self.user_id!r}, task_id={self.task_id!r})>"
