"""
User management service.

This module provides:
- Register an account owner (unique username and email)
- Get owner by ID
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import transaction_scope
from src.exceptions import AlreadyExistsError, NotFoundError
from src.models.user import User
from src.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service class for account owners."""

    def __init__(self, session: AsyncSession):
        """
        Initialize UserService with database session.

        Args:
            session: Async database session
        """
        self.session = session
        self.user_repo = UserRepository(session)

    async def create_user(self, username: str, email: str) -> User:
        """
        Register a new user.

        Args:
            username: Unique username
            email: Unique email address (case-insensitive)

        Returns:
            Created User instance

        Raises:
            AlreadyExistsError: If username or email is already registered
        """
        if await self.user_repo.exists_by_username_or_email(username, email):
            logger.info(f"Registration rejected, username or email taken: {username}")
            raise AlreadyExistsError(
                "User",
                message="Username or email already registered",
            )

        async with transaction_scope(self.session):
            user = await self.user_repo.add(User(username=username, email=email))

        logger.info(f"User {user.username} created: {user.id}")

        return user

    async def get_user(self, user_id: uuid.UUID) -> User:
        """
        Get user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repo.get_by_id(user_id)

        if user is None:
            logger.info(f"User {user_id} not found")
            raise NotFoundError("User")

        return user
