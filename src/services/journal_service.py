"""
Journal service.

Writes the journal entry that accompanies every balance operation. It does
not commit: the entry is part of the caller's unit of work, so the balance
change and its entry are persisted together or not at all.
"""

import logging
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.account import Account
from src.models.enums import OperationType
from src.models.journal import JournalEntry
from src.repositories.journal_repository import JournalRepository

logger = logging.getLogger(__name__)


class JournalService:
    """Service class for the append-only operation journal."""

    def __init__(self, session: AsyncSession):
        """
        Initialize JournalService with database session.

        Args:
            session: Async database session
        """
        self.session = session
        self.journal_repo = JournalRepository(session)

    async def add_operation_to_journal(
        self,
        account: Account,
        initial_amount: Decimal,
        final_amount: Decimal,
        operation_type: OperationType,
    ) -> JournalEntry:
        """
        Record a balance operation.

        Args:
            account: Account whose balance changed
            initial_amount: Balance before the operation
            final_amount: Balance after the operation
            operation_type: credit or debit

        Returns:
            The appended JournalEntry (flushed, not committed)
        """
        entry = JournalEntry(
            account_id=account.id,
            initial_amount=initial_amount,
            final_amount=final_amount,
            operation_type=operation_type,
            operation_time=datetime.now(UTC),
        )
        entry = await self.journal_repo.append(entry)

        logger.debug(
            f"Journal entry {entry.id}: account {account.id} "
            f"{operation_type.value} {initial_amount} -> {final_amount}"
        )

        return entry
