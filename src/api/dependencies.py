"""
FastAPI dependencies.

This module provides:
- Database session management
- Service construction per request
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_db
from src.services import AccountService, UserService


def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    """
    Dependency to get AccountService instance.

    This dependency provides an AccountService with an active database session.

    Args:
        db: Database session

    Returns:
        AccountService instance

    Usage:
        @router.post("/api/v1/accounts")
        async def create_account(
            account_service: AccountService = Depends(get_account_service)
        ):
            return await account_service.create_account(...)
    """
    return AccountService(db)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """
    Dependency to get UserService instance.

    Args:
        db: Database session

    Returns:
        UserService instance
    """
    return UserService(db)


# Convenience type aliases for common dependencies
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
