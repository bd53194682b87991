"""
Enums for ledger models.

This module defines:
- OperationType: Direction of a balance operation (credit or debit)
- BlockingOperation: Requested change of an account's enabled flag

OperationType is persisted on journal entries; BlockingOperation only
travels from the API to the service layer.
"""

import enum


class OperationType(str, enum.Enum):
    """
    Balance operation types.

    Attributes:
        credit: Money in - the amount is added to the balance
        debit: Money out (withdrawal) - the amount is subtracted from the balance.
            A debit may drive the balance below zero.

    Usage:
        account = await account_service.update_account(
            account_id=account.id,
            operation_type=OperationType.debit,
            amount=Decimal("25.00"),
        )
    """

    credit = "credit"
    debit = "debit"


class BlockingOperation(str, enum.Enum):
    """
    Account blocking operations.

    Attributes:
        block: Disable the account; balance operations are rejected
        unblock: Enable the account again

    Applying the same operation twice is not an error.
    """

    block = "block"
    unblock = "unblock"

    @property
    def enabled(self) -> bool:
        """Value of Account.enabled after this operation."""
        return self is BlockingOperation.unblock
