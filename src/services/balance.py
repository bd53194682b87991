"""
Balance arithmetic for ledger operations.

Pure functions, no I/O:
- round_half_down: quantize a balance to cents
- apply_operation: compute the balance after a credit or debit
- validate_amount: check an operation amount against the ledger rules

Amounts and balances must fit the NUMERIC(15, 2) balance column: their
absolute value stays strictly below BALANCE_LIMIT.

Rounding:
    Balances are quantized to 2 decimal places with half-down rounding,
    matching the legacy ledger. How an exact tie is broken is configurable
    (settings.ledger_tie_break):

    - "floor": ties go toward negative infinity
        1.005 -> 1.00, -1.005 -> -1.01
    - "zero": ties go toward zero (decimal.ROUND_HALF_DOWN)
        1.005 -> 1.00, -1.005 -> -1.00

    Non-ties round to the nearest cent in both modes.
"""

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import Literal

from src.core.config import settings
from src.exceptions import InvalidInputError
from src.models.account import BALANCE_LIMIT
from src.models.enums import OperationType

CENT = Decimal("0.01")

TieBreak = Literal["floor", "zero"]


def round_half_down(value: Decimal, tie_break: TieBreak | None = None) -> Decimal:
    """
    Round a value to 2 decimal places, breaking ties downward.

    Args:
        value: Amount to round
        tie_break: "floor" or "zero"; defaults to settings.ledger_tie_break

    Returns:
        Value quantized to 0.01

    Example:
        >>> round_half_down(Decimal("1.005"))
        Decimal('1.00')
        >>> round_half_down(Decimal("-1.005"))
        Decimal('-1.01')
    """
    mode = tie_break or settings.ledger_tie_break

    if mode == "floor" and value < 0:
        # Away from zero is downward for negative values
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    return value.quantize(CENT, rounding=ROUND_HALF_DOWN)


def apply_operation(
    balance: Decimal,
    operation_type: OperationType,
    amount: Decimal,
    tie_break: TieBreak | None = None,
) -> Decimal:
    """
    Compute the balance after an operation.

    A debit subtracts the amount, a credit adds it. The result is not
    floored at zero, but it must fit the balance column.

    Args:
        balance: Current balance
        operation_type: credit or debit
        amount: Operation amount
        tie_break: Rounding tie-break, see round_half_down

    Returns:
        New balance rounded to 2 decimal places

    Raises:
        InvalidInputError: If the new balance is out of range
    """
    if operation_type == OperationType.debit:
        result = balance - amount
    else:
        result = balance + amount

    if abs(result) < BALANCE_LIMIT:
        result = round_half_down(result, tie_break)

    if abs(result) >= BALANCE_LIMIT:
        raise InvalidInputError(
            field="amount",
            message="Resulting balance is out of range",
            details={"amount": str(amount), "balance": str(balance)},
        )

    return result


def validate_amount(amount: Decimal, allow_negative: bool | None = None) -> None:
    """
    Check an operation amount.

    Non-finite values (NaN, Infinity) and values outside BALANCE_LIMIT are
    always rejected. Negative amounts are rejected unless allowed, either
    explicitly or through settings.ledger_allow_negative_amounts.

    Args:
        amount: Operation amount
        allow_negative: Override for settings.ledger_allow_negative_amounts

    Raises:
        InvalidInputError: If the amount is not acceptable
    """
    if allow_negative is None:
        allow_negative = settings.ledger_allow_negative_amounts

    if not amount.is_finite():
        raise InvalidInputError(
            field="amount",
            message="Amount must be a finite decimal number",
            details={"amount": str(amount)},
        )

    if abs(amount) >= BALANCE_LIMIT:
        raise InvalidInputError(
            field="amount",
            message="Amount is too large (max ±9,999,999,999,999.99)",
            details={"amount": str(amount)},
        )

    if amount < 0 and not allow_negative:
        raise InvalidInputError(
            field="amount",
            message="Amount must not be negative",
            details={"amount": str(amount)},
        )
