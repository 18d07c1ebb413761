from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from tasktracker.database.base import Base, BigIntId


class Comment(Base):
    """A user's comment on a leaf-level task."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id"), nullable=False, index=True
    )

    task_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("tasks.id"), nullable=False, index=True
    )

    content: Mapped[str] = mapped_column(String(2024), nullable=False)

    # unix epoch seconds
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    updated_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<Comment(id={self.id!r}, user_id={self.user_id!r}, task_id={self.task_id!r})>"
