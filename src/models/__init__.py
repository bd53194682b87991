"""
Database models for Reckoning Ledger.

This module exports all SQLAlchemy models and the declarative base.
Import models from this module to ensure proper initialization.
"""

from src.models.account import Account
from src.models.base import Base
from src.models.enums import BlockingOperation, OperationType
from src.models.journal import JournalEntry
from src.models.mixins import TimestampMixin
from src.models.user import User

__all__ = [
    # Base
    "Base",
    # Mixins
    "TimestampMixin",
    # User models
    "User",
    # Ledger models
    "Account",
    "JournalEntry",
    # Enums
    "BlockingOperation",
    "OperationType",
]
