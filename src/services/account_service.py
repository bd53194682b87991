"""
Account management service.

This module provides:
- Create account for an existing user
- Apply a credit/debit operation with its journal entry
- List a user's accounts
- Block / unblock an account
"""

import logging
import uuid
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import transaction_scope
from src.exceptions import AccountBlockedError, NotFoundError
from src.models.account import Account
from src.models.enums import BlockingOperation, OperationType
from src.repositories.account_repository import AccountRepository
from src.repositories.user_repository import UserRepository
from src.services.balance import apply_operation, validate_amount
from src.services.journal_service import JournalService

logger = logging.getLogger(__name__)


class AccountService:
    """
    Service class for account operations.

    This service handles:
    - Account creation (owner must exist)
    - Balance operations on enabled accounts, journaled atomically
    - Listing accounts by owner
    - Blocking and unblocking accounts

    Every mutating method commits exactly one transaction. Failures raise
    before anything is written or roll the whole transaction back.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize AccountService with database session.

        Args:
            session: Async database session
        """
        self.session = session
        self.account_repo = AccountRepository(session)
        self.user_repo = UserRepository(session)
        self.journal_service = JournalService(session)

    async def create_account(self, user_id: uuid.UUID) -> Account:
        """
        Create a new account for a user.

        The account starts enabled with a zero balance. A user may own
        any number of accounts.

        Args:
            user_id: ID of the owner

        Returns:
            Created Account instance

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            logger.info(f"Account creation requested for unknown user {user_id}")
            raise NotFoundError("User")

        async with transaction_scope(self.session):
            account = await self.account_repo.add(
                Account(
                    user_id=user.id,
                    balance=Decimal("0.00"),
                    enabled=True,
                )
            )

        logger.info(f"Account of user {user.username} created: {account.id}")

        return account

    async def get_account(self, account_id: uuid.UUID) -> Account:
        """
        Get account by ID.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.account_repo.get_by_id(account_id)

        if account is None:
            logger.info(f"Account {account_id} not found")
            raise NotFoundError("Account")

        return account

    async def update_account(
        self,
        account_id: uuid.UUID,
        operation_type: OperationType,
        amount: Decimal,
    ) -> Account:
        """
        Apply a credit or debit to an account.

        Steps:
        1. Validate the amount against the ledger rules
        2. Load the account (must exist)
        3. Reject the operation if the account is blocked
        4. Compute the new balance, rounded half-down to cents; it must fit
           the balance column
        5. Save the balance and append the journal entry in one transaction

        Debits may leave the balance negative.

        Args:
            account_id: ID of the account to change
            operation_type: credit or debit
            amount: Operation amount

        Returns:
            Updated Account instance

        Raises:
            InvalidInputError: If the amount is rejected or the resulting
                balance is out of range
            NotFoundError: If the account does not exist
            AccountBlockedError: If the account is disabled
            PersistenceError: If the database rejects the transaction

        Example:
            account = await account_service.update_account(
                account_id=account.id,
                operation_type=OperationType.credit,
                amount=Decimal("50.00"),
            )
        """
        validate_amount(amount)

        account = await self.get_account(account_id)

        if not account.enabled:
            logger.info(f"Account {account.id} blocked")
            raise AccountBlockedError(account.id)

        initial_amount = account.balance
        result = apply_operation(initial_amount, operation_type, amount)

        async with transaction_scope(self.session):
            account.balance = result
            account = await self.account_repo.update(account)
            await self.journal_service.add_operation_to_journal(
                account=account,
                initial_amount=initial_amount,
                final_amount=result,
                operation_type=operation_type,
            )

        logger.debug(
            f"Account {account.id} of user {account.user_id} changed: "
            f"{operation_type.value} {amount}, {initial_amount} -> {result}"
        )

        return account

    async def get_all_by_user_id(self, user_id: uuid.UUID) -> list[Account]:
        """
        List all accounts owned by a user.

        Args:
            user_id: ID of the owner

        Returns:
            List of accounts, oldest first; empty if there are none
        """
        return await self.account_repo.get_by_user(user_id)

    async def blocking_operations(
        self,
        account_id: uuid.UUID,
        blocking_operation: BlockingOperation,
    ) -> Account:
        """
        Block or unblock an account.

        Setting the state the account already has is not an error.

        Args:
            account_id: ID of the account
            blocking_operation: block or unblock

        Returns:
            Updated Account instance

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.get_account(account_id)

        async with transaction_scope(self.session):
            account.enabled = blocking_operation.enabled
            account = await self.account_repo.update(account)

        logger.info(
            f"Account {account.id} {blocking_operation.value}ed "
            f"(enabled={account.enabled})"
        )

        return account
