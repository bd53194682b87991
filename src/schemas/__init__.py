"""
Pydantic schemas for API request/response handling.
"""

from src.schemas.account import (
    AccountCreate,
    AccountOperation,
    AccountResponse,
    AccountStatusUpdate,
)
from src.schemas.user import UserCreate, UserResponse

__all__ = [
    # Account schemas
    "AccountCreate",
    "AccountOperation",
    "AccountResponse",
    "AccountStatusUpdate",
    # User schemas
    "UserCreate",
    "UserResponse",
]
