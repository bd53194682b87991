"""
Database repositories for Reckoning Ledger.

This module exports all repository classes for database operations.
"""

from src.repositories.account_repository import AccountRepository
from src.repositories.base import BaseRepository
from src.repositories.journal_repository import JournalRepository
from src.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "AccountRepository",
    "JournalRepository",
    "UserRepository",
]
