"""
User model.

Users own accounts. The ledger only needs to know that an owner exists
and how to name it in logs; authentication is handled elsewhere.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """
    Account owner.

    Attributes:
        id: UUID primary key
        username: Unique username (alphanumeric, underscore, hyphen)
        email: Unique email address
        created_at: When the user was created
        updated_at: When the user was last updated
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"User(id={self.id}, username={self.username}, email={self.email})"
