"""
Core module for Reckoning Ledger.

Exports the main configuration and database components.
"""

from src.core.config import settings
from src.core.database import check_database_connection, get_db, transaction_scope

__all__ = [
    # Config
    "settings",
    # Database
    "check_database_connection",
    "get_db",
    "transaction_scope",
]
