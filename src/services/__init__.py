"""
Business logic services for Reckoning Ledger.

This module exports all service classes.
"""

from src.services.account_service import AccountService
from src.services.journal_service import JournalService
from src.services.user_service import UserService

__all__ = [
    "AccountService",
    "JournalService",
    "UserService",
]
