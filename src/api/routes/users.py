"""
User API routes.

This module provides:
- POST /api/v1/users - Register an account owner
- GET /api/v1/users/{user_id} - Get user by ID
- GET /api/v1/users/{user_id}/accounts - List the user's accounts
"""

import logging
import uuid

from fastapi import APIRouter, status

from src.api.dependencies import AccountServiceDep, UserServiceDep
from src.schemas.account import AccountResponse
from src.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    responses={
        409: {"description": "Username or email already registered"},
        422: {"description": "Validation error"},
    },
)
async def create_user(
    user_data: UserCreate,
    user_service: UserServiceDep,
) -> UserResponse:
    """Register a new account owner."""
    user = await user_service.create_user(
        username=user_data.username,
        email=str(user_data.email),
    )

    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
    responses={
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: uuid.UUID,
    user_service: UserServiceDep,
) -> UserResponse:
    """Get user details by ID."""
    user = await user_service.get_user(user_id)

    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}/accounts",
    response_model=list[AccountResponse],
    summary="List user's accounts",
    description="""
    List all accounts owned by a user, oldest first.

    Returns an empty list when the user has no accounts.
    """,
)
async def list_user_accounts(
    user_id: uuid.UUID,
    account_service: AccountServiceDep,
) -> list[AccountResponse]:
    """List accounts owned by a user."""
    accounts = await account_service.get_all_by_user_id(user_id)

    return [AccountResponse.model_validate(account) for account in accounts]
