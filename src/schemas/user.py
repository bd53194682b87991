"""
User Pydantic schemas for API request/response handling.

This module provides:
- User creation schema
- User response schema
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserBase(BaseModel):
    """
    Base user schema with common fields.

    Attributes:
        email: User's email address (unique)
        username: User's username (unique)
    """

    email: EmailStr = Field(description="User's email address")
    username: str = Field(
        min_length=3,
        max_length=50,
        description="User's username (3-50 characters)",
    )


class UserCreate(UserBase):
    """Schema for registering an account owner."""

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        """Validate username format."""
        if not value.replace("_", "").replace("-", "").isalnum():
            raise ValueError(
                "Username can only contain letters, numbers, underscores, and hyphens"
            )
        return value


class UserResponse(UserBase):
    """
    Schema for user response.

    Attributes:
        id: User UUID
        email: Email address
        username: Username
        created_at: Registration timestamp
    """

    id: uuid.UUID = Field(description="User unique identifier")
    created_at: datetime = Field(description="When the user was created")

    model_config = {"from_attributes": True}
