"""
Journal repository for the append-only operation log.

Journal entries are immutable: this repository offers append and
read helpers only, no update or delete.
"""

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.journal import JournalEntry


class JournalRepository:
    """
    Repository for JournalEntry records.

    Usage:
        journal_repo = JournalRepository(session)
        await journal_repo.append(entry)
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Journal repository.

        Args:
            session: Async database session
        """
        self.session = session

    async def append(self, entry: JournalEntry) -> JournalEntry:
        """
        Append an entry to the journal.

        The entry is flushed but not committed; it becomes durable together
        with the balance change when the caller's transaction commits.

        Args:
            entry: New journal entry

        Returns:
            The persisted entry
        """
        self.session.add(entry)
        await self.session.flush()
        return entry

    async def get_by_account(self, account_id: uuid.UUID) -> list[JournalEntry]:
        """
        Get journal entries of an account in the order they were recorded.

        Args:
            account_id: Account ID

        Returns:
            List of JournalEntry instances, oldest first
        """
        query = (
            select(JournalEntry)
            .where(JournalEntry.account_id == account_id)
            .order_by(JournalEntry.operation_time.asc())
        )

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by_account(self, account_id: uuid.UUID) -> int:
        """
        Count journal entries of an account.

        Args:
            account_id: Account ID

        Returns:
            Number of entries
        """
        query = (
            select(func.count())
            .select_from(JournalEntry)
            .where(JournalEntry.account_id == account_id)
        )

        result = await self.session.execute(query)
        return result.scalar_one()
