"""
Account model.

Architecture:
- Each account belongs to one user (owner via user_id foreign key)
- A user may own any number of accounts
- The balance only changes through ledger operations, each of which
  appends one JournalEntry
- Blocked accounts (enabled = False) reject ledger operations
"""

import uuid
from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base
from src.models.mixins import TimestampMixin

# Exclusive bound on abs(balance) for NUMERIC(15, 2): 13 integer digits,
# so balances range from -9,999,999,999,999.99 to 9,999,999,999,999.99
BALANCE_LIMIT = Decimal("10") ** 13


class Account(Base, TimestampMixin):
    """
    Ledger account.

    Attributes:
        id: UUID primary key (immutable)
        user_id: Owner of the account (immutable after creation)
        balance: Current balance, always rounded to 2 decimal places.
            Can be negative: debits are not floored at zero.
        enabled: Whether balance operations are permitted
        created_at: When account was created
        updated_at: When account was last updated

    Example:
        account = Account(
            user_id=user.id,
            balance=Decimal("0.00"),
            enabled=True,
        )
    """

    __tablename__ = "accounts"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Decimal(15, 2) allows balances up to 9,999,999,999,999.99
    balance: Mapped[Decimal] = mapped_column(
        Numeric(15, 2),
        nullable=False,
        default=Decimal("0.00"),
    )

    enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    def __repr__(self) -> str:
        """String representation of Account."""
        return (
            f"Account(id={self.id}, user_id={self.user_id}, "
            f"balance={self.balance}, enabled={self.enabled})"
        )
