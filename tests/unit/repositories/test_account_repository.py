"""
Unit tests for AccountRepository.

Tests:
- Listing accounts by owner
- Generic add, lookup and update inherited from BaseRepository
"""

import uuid
from decimal import Decimal

import pytest

from src.models import Account, User
from src.repositories.account_repository import AccountRepository


@pytest.mark.asyncio
class TestAccountRepository:
    """Test suite for AccountRepository."""

    async def test_add_sets_defaults(self, db_session, test_user):
        """Adding an account populates ID and timestamps."""
        repo = AccountRepository(db_session)

        account = await repo.add(Account(user_id=test_user.id))
        await db_session.commit()

        assert account.id is not None
        assert account.balance == Decimal("0.00")
        assert account.enabled is True
        assert account.created_at is not None

    async def test_get_by_user_returns_only_owned_accounts(self, db_session, test_user):
        """Accounts of other users are not listed."""
        other = User(username="otheruser", email="other@example.com")
        db_session.add(other)
        await db_session.flush()

        repo = AccountRepository(db_session)
        mine = await repo.add(Account(user_id=test_user.id))
        await repo.add(Account(user_id=other.id))
        await db_session.commit()

        accounts = await repo.get_by_user(test_user.id)

        assert [a.id for a in accounts] == [mine.id]

    async def test_get_by_user_empty(self, db_session):
        repo = AccountRepository(db_session)

        assert await repo.get_by_user(uuid.uuid4()) == []

    async def test_get_by_id(self, db_session, funded_account):
        repo = AccountRepository(db_session)

        account = await repo.get_by_id(funded_account.id)

        assert account is not None
        assert account.balance == Decimal("100.00")
        assert await repo.get_by_id(uuid.uuid4()) is None

    async def test_update_persists_changes(self, db_session, funded_account):
        """update flushes in-memory changes."""
        repo = AccountRepository(db_session)

        account = await repo.get_by_id(funded_account.id)
        account.enabled = False
        await repo.update(account)
        await db_session.commit()

        reloaded = await repo.get_by_id(funded_account.id)
        assert reloaded.enabled is False
