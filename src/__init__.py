"""Reckoning Ledger application package."""
