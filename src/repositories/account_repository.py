"""
Account repository for database operations.

This module provides database operations for Account model, including:
- Standard CRUD operations (inherited from BaseRepository)
- Listing the accounts of one owner
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.account import Account
from src.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """
    Repository for Account model database operations.

    Usage:
        account_repo = AccountRepository(session)
        accounts = await account_repo.get_by_user(user_id)
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Account repository.

        Args:
            session: Async database session
        """
        super().__init__(Account, session)

    async def get_by_user(self, user_id: uuid.UUID) -> list[Account]:
        """
        Get all accounts owned by a user.

        Args:
            user_id: ID of the user who owns the accounts

        Returns:
            List of Account instances, oldest first. Empty if the user
            has no accounts or does not exist.

        Example:
            accounts = await account_repo.get_by_user(user_id=user.id)
        """
        query = (
            select(Account)
            .where(Account.user_id == user_id)
            .order_by(Account.created_at.asc(), Account.id.asc())
        )

        result = await self.session.execute(query)
        return list(result.scalars().all())
