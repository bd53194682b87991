"""
User repository for user-specific database operations.

This module provides database operations for the User model: the
uniqueness check used when registering owners. Owner lookups by ID come
from BaseRepository.
"""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.user import User
from src.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User model operations.

    Extends BaseRepository with the email / username uniqueness check.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    async def exists_by_username_or_email(self, username: str, email: str) -> bool:
        """
        Check whether a username or email is already taken.

        Email comparison is case-insensitive.

        Args:
            username: Username to check
            email: Email address to check

        Returns:
            True if either value is already registered
        """
        query = select(func.count()).select_from(User).where(
            or_(
                User.username == username,
                func.lower(User.email) == email.lower(),
            )
        )

        result = await self.session.execute(query)
        return result.scalar_one() > 0
