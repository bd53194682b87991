"""
Account Pydantic schemas for API request/response handling.

This module provides:
- Account creation schema
- Balance operation and blocking operation schemas
- Account response schema (the account view)
"""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer, field_validator

from src.models.account import BALANCE_LIMIT
from src.models.enums import BlockingOperation, OperationType


class AccountCreate(BaseModel):
    """
    Schema for account creation.

    Attributes:
        user_id: Owner of the new account (must exist)
    """

    user_id: uuid.UUID = Field(
        description="ID of the user who will own the account",
        examples=["7c9e6679-7425-40de-944b-e07fc1f90ae7"],
    )


class AccountOperation(BaseModel):
    """
    Schema for a balance operation.

    The amount may carry more than 2 decimal places; the resulting balance
    is rounded half-down to cents. Whether negative amounts are accepted is
    a server setting.

    Attributes:
        operation_type: credit or debit
        amount: Operation amount (decimal string or number)
    """

    operation_type: OperationType = Field(
        description="Operation type: credit (money in) or debit (money out)",
        examples=["credit", "debit"],
    )

    amount: Decimal = Field(
        description="Operation amount",
        examples=["50.00", "200.00"],
    )

    @field_validator("amount")
    @classmethod
    def validate_amount_range(cls, value: Decimal) -> Decimal:
        """Amount must fit in NUMERIC(15,2)."""
        if value.is_finite() and abs(value) >= BALANCE_LIMIT:
            raise ValueError("Amount is too large (max ±9,999,999,999,999.99)")
        return value


class AccountStatusUpdate(BaseModel):
    """
    Schema for blocking or unblocking an account.

    Attributes:
        operation: block or unblock
    """

    operation: BlockingOperation = Field(
        description="block disables balance operations, unblock enables them",
        examples=["block", "unblock"],
    )


class AccountResponse(BaseModel):
    """
    Schema for account response.

    Attributes:
        id: Account UUID
        user_id: Owner's user ID
        balance: Current balance (2 decimal places, may be negative)
        enabled: Whether balance operations are permitted
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: uuid.UUID = Field(description="Account unique identifier")
    user_id: uuid.UUID = Field(description="Owner's user ID")
    balance: Decimal = Field(description="Current account balance")
    enabled: bool = Field(description="False when the account is blocked")

    created_at: datetime = Field(description="When account was created")
    updated_at: datetime = Field(description="When account was last updated")

    model_config = {"from_attributes": True}

    @field_serializer("balance")
    def serialize_balance(self, value: Decimal) -> str:
        """Always render cents, e.g. '0.00' rather than '0'."""
        return f"{value:.2f}"
