from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tasktracker.database.base import Base, BigIntId


class User(Base):
    """
    SQLAlchemy model for User.
    Holds credentials only as a fixed-length hex digest.
    """

    __tablename__ = "users"

    # Store-assigned identifier (primary key)
    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)

    # Username (unique; letters, digits, '.' and '_')
    username: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)

    # Email address (unique)
    email: Mapped[str] = mapped_column(String(254), unique=True, index=True, nullable=False)

    # SHA-256 style digest, 64 lowercase hex chars (never a plain password)
    password_hash: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        # password_hash intentionally left out
        return f"<User(id={self.id!r}, username={self.username!r}, email={self.email!r})>"
