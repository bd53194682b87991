"""
API routes for Reckoning Ledger.

This package contains all API endpoint definitions organized by feature.
"""

from src.api.routes import accounts, health, root, users

__all__ = ["accounts", "health", "root", "users"]
