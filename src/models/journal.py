"""
JournalEntry model.

The journal is the append-only audit trail of balance operations. One entry
is written, in the same transaction as the balance update, for every
successful credit or debit. Entries are never updated or deleted.
"""

import uuid
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base
from src.models.enums import OperationType


class JournalEntry(Base):
    """
    Record of one balance operation.

    Attributes:
        id: UUID primary key
        account_id: Account whose balance changed
        initial_amount: Balance before the operation
        final_amount: Balance after the operation (rounded)
        operation_type: credit or debit
        operation_time: When the operation was recorded (UTC)

    Example:
        entry = JournalEntry(
            account_id=account.id,
            initial_amount=Decimal("100.00"),
            final_amount=Decimal("150.00"),
            operation_type=OperationType.credit,
            operation_time=datetime.now(UTC),
        )
    """

    __tablename__ = "journal"

    account_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )

    initial_amount: Mapped[Decimal] = mapped_column(
        Numeric(15, 2),
        nullable=False,
    )

    final_amount: Mapped[Decimal] = mapped_column(
        Numeric(15, 2),
        nullable=False,
    )

    operation_type: Mapped[OperationType] = mapped_column(
        nullable=False,
    )

    operation_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    __table_args__ = (
        Index("ix_journal_account_id_operation_time", "account_id", "operation_time"),
    )

    def __repr__(self) -> str:
        """String representation of JournalEntry."""
        return (
            f"JournalEntry(account_id={self.account_id}, "
            f"{self.operation_type.value}: {self.initial_amount} -> {self.final_amount})"
        )
