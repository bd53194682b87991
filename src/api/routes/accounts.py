"""
Account API routes.

This module provides:
- POST /api/v1/accounts - Create new account
- GET /api/v1/accounts/{account_id} - Get account by ID
- POST /api/v1/accounts/{account_id}/operations - Credit or debit an account
- PATCH /api/v1/accounts/{account_id}/status - Block or unblock an account
"""

import logging
import uuid

from fastapi import APIRouter, status

from src.api.dependencies import AccountServiceDep
from src.schemas.account import (
    AccountCreate,
    AccountOperation,
    AccountResponse,
    AccountStatusUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new account",
    description="""
    Create a new account for an existing user.

    The account starts enabled with a balance of 0.00. A user may own
    several accounts.
    """,
    responses={
        201: {
            "description": "Account created successfully",
            "content": {
                "application/json": {
                    "example": {
                        "id": "550e8400-e29b-41d4-a716-446655440000",
                        "user_id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                        "balance": "0.00",
                        "enabled": True,
                        "created_at": "2025-11-04T00:00:00Z",
                        "updated_at": "2025-11-04T00:00:00Z",
                    }
                }
            },
        },
        404: {"description": "User not found"},
        422: {"description": "Validation error"},
    },
)
async def create_account(
    account_data: AccountCreate,
    account_service: AccountServiceDep,
) -> AccountResponse:
    """Create new account for a user."""
    account = await account_service.create_account(user_id=account_data.user_id)

    return AccountResponse.model_validate(account)


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    summary="Get account by ID",
    responses={
        404: {"description": "Account not found"},
    },
)
async def get_account(
    account_id: uuid.UUID,
    account_service: AccountServiceDep,
) -> AccountResponse:
    """Get account details by ID."""
    account = await account_service.get_account(account_id)

    return AccountResponse.model_validate(account)


@router.post(
    "/{account_id}/operations",
    response_model=AccountResponse,
    summary="Credit or debit an account",
    description="""
    Apply a balance operation to an account.

    - **credit** adds the amount, **debit** subtracts it
    - The new balance is rounded half-down to 2 decimal places
    - Debits may leave the balance negative
    - Every successful operation appends one journal entry, committed
      together with the balance change

    Blocked accounts reject operations with 409 ACCOUNT_BLOCKED.
    """,
    responses={
        404: {"description": "Account not found"},
        409: {"description": "Account is blocked"},
        422: {"description": "Invalid amount or operation type"},
    },
)
async def apply_operation(
    account_id: uuid.UUID,
    operation: AccountOperation,
    account_service: AccountServiceDep,
) -> AccountResponse:
    """
    Credit or debit an account.

    Request body:
        - operation_type: credit or debit
        - amount: Operation amount
    """
    account = await account_service.update_account(
        account_id=account_id,
        operation_type=operation.operation_type,
        amount=operation.amount,
    )

    return AccountResponse.model_validate(account)


@router.patch(
    "/{account_id}/status",
    response_model=AccountResponse,
    summary="Block or unblock an account",
    description="""
    Set whether the account accepts balance operations.

    Repeating the current state is allowed and leaves the account unchanged.
    """,
    responses={
        404: {"description": "Account not found"},
        422: {"description": "Invalid blocking operation"},
    },
)
async def update_account_status(
    account_id: uuid.UUID,
    status_update: AccountStatusUpdate,
    account_service: AccountServiceDep,
) -> AccountResponse:
    """Block or unblock an account."""
    account = await account_service.blocking_operations(
        account_id=account_id,
        blocking_operation=status_update.operation,
    )

    return AccountResponse.model_validate(account)
