"""
Unit tests for database helpers.

Tests:
- transaction_scope commits, rolls back and wraps database errors
- check_database_connection
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from src.core.database import check_database_connection, transaction_scope
from src.exceptions import NotFoundError, PersistenceError
from src.models import User
from src.repositories.account_repository import AccountRepository


@pytest.mark.asyncio
class TestTransactionScope:
    """Test suite for transaction_scope."""

    async def test_commits_on_success(self, session_factory, funded_account):
        async with session_factory() as session:
            account = await AccountRepository(session).get_by_id(funded_account.id)
            async with transaction_scope(session):
                account.balance = Decimal("42.00")

        async with session_factory() as session:
            account = await AccountRepository(session).get_by_id(funded_account.id)
            assert account.balance == Decimal("42.00")

    async def test_rolls_back_and_reraises_application_errors(
        self, session_factory, funded_account
    ):
        async with session_factory() as session:
            account = await AccountRepository(session).get_by_id(funded_account.id)
            with pytest.raises(NotFoundError):
                async with transaction_scope(session):
                    account.balance = Decimal("42.00")
                    await session.flush()
                    raise NotFoundError("User")

        async with session_factory() as session:
            account = await AccountRepository(session).get_by_id(funded_account.id)
            assert account.balance == Decimal("100.00")

    async def test_wraps_database_errors(self, db_session, test_user):
        """A unique constraint violation surfaces as PersistenceError."""
        with pytest.raises(PersistenceError) as exc_info:
            async with transaction_scope(db_session):
                db_session.add(
                    User(username=test_user.username, email="dup@example.com")
                )
                await db_session.flush()

        assert isinstance(exc_info.value.__cause__, IntegrityError)


@pytest.mark.asyncio
class TestCheckDatabaseConnection:
    async def test_reachable(self, session_factory):
        assert await check_database_connection(session_factory) is True

    async def test_no_sessionmaker(self):
        assert await check_database_connection(None) is False
