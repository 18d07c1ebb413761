from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tasktracker.database.base import Base, BigIntId


class Project(Base):
    """
    SQLAlchemy model for Project.
    Top-level container that every task belongs to.
    """

    __tablename__ = "projects"

    # Store-assigned identifier (primary key)
    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)

    # Project name (unique, 1-128 chars)
    name: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Project(id={self.id!r}, name={self.name!r})>"
