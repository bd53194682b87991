"""
Base repository with generic CRUD operations.

This module provides a generic repository pattern for database operations.
All specific repositories should inherit from BaseRepository.

Repositories only flush; committing is the job of the service that owns
the unit of work (see core.database.transaction_scope).

Type Parameters:
    ModelType: The SQLAlchemy model class (e.g., User, Account, etc.)
"""

import uuid
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.base import Base

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository for database operations.

    Provides common CRUD operations that work with any SQLAlchemy model.

    Type Parameters:
        ModelType: The SQLAlchemy model class

    Usage:
        class UserRepository(BaseRepository[User]):
            def __init__(self, session: AsyncSession):
                super().__init__(User, session)

            # Add custom methods here
            async def exists_by_username_or_email(self, username, email) -> bool:
                ...
    """

    def __init__(self, model: type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: The SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def add(self, instance: ModelType) -> ModelType:
        """
        Persist a model instance.

        Args:
            instance: Model instance to persist

        Returns:
            Persisted model instance (with ID and timestamps populated)
        """
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get_by_id(self, id: uuid.UUID) -> ModelType | None:
        """
        Get a record by ID.

        Args:
            id: UUID of the record

        Returns:
            Model instance or None if not found

        Example:
            user = await user_repo.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User")
        """
        query = select(self.model).where(self.model.id == id)

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def update(self, instance: ModelType) -> ModelType:
        """
        Persist changes to an already-modified model instance.

        The caller is responsible for modifying the instance attributes
        before calling this method. This method only handles persistence
        (flush + refresh).

        Args:
            instance: Model instance with changes already applied

        Returns:
            Updated model instance (with refreshed timestamps)

        Example:
            account = await account_repo.get_by_id(account_id)
            account.enabled = False
            account = await account_repo.update(account)
        """
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
