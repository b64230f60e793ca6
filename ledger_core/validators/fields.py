"""Name and numeric field validators.

Each validator returns ``None`` when the value is acceptable and a
human-readable reason otherwise. Callers raise the error type that fits
their context (an amount is an ``InvalidAmountError`` for a deposit but an
``InvalidInitialBalanceError`` when opening an account).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ledger_core.config import DEFAULT_LIMITS, LimitsConfig


def to_decimal(value: Any) -> Decimal | None:
    """Convert a number-like value to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``.
    Returns ``None`` for booleans and anything that does not parse.
    NaN and infinities are returned as-is for the caller to reject.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            return None
    return None


def _numeric_error(value: Any, label: str) -> str | None:
    number = to_decimal(value)
    if number is None:
        return f"{label} is not a valid number"
    if number.is_nan():
        return f"{label} is not a valid number"
    if number.is_infinite():
        return f"{label} cannot be infinite"
    if number < 0:
        return f"{label} cannot be negative"
    return None


def name_error(name: str | None, limits: LimitsConfig = DEFAULT_LIMITS) -> str | None:
    """Validate a client name (trimmed, letters and spaces only)."""
    if name is None or not isinstance(name, str):
        return "Name must not be empty"

    trimmed = name.strip()
    if not trimmed:
        return "Name must not be empty"

    if len(trimmed) < limits.name_min_length:
        return f"Name must have at least {limits.name_min_length} characters"

    if len(trimmed) > limits.name_max_length:
        return f"Name must have at most {limits.name_max_length} characters"

    # Unicode letters, so accented names (João, Conceição) pass
    if not all(ch.isalpha() or ch.isspace() for ch in trimmed):
        return "Name must contain only letters and spaces"

    return None


def operation_amount_error(
    amount: Any,
    label: str = "Amount",
    limits: LimitsConfig = DEFAULT_LIMITS,
) -> str | None:
    """Validate a deposit, withdraw or transfer amount."""
    reason = _numeric_error(amount, label)
    if reason is not None:
        return reason

    value = to_decimal(amount)
    if value < limits.min_operation_amount:
        return f"{label} must be at least {limits.min_operation_amount:.2f}"
    if value > limits.max_operation_amount:
        return f"{label} cannot exceed {limits.max_operation_amount:.2f}"
    return None


def initial_balance_error(
    balance: Any,
    limits: LimitsConfig = DEFAULT_LIMITS,
) -> str | None:
    """Validate the opening balance of a new account."""
    reason = _numeric_error(balance, "Initial balance")
    if reason is not None:
        return reason

    value = to_decimal(balance)
    if value < limits.min_initial_balance:
        return f"Initial balance cannot be below {limits.min_initial_balance:.2f}"
    if value > limits.max_initial_balance:
        return f"Initial balance cannot exceed {limits.max_initial_balance:.2f}"
    return None


def yield_percent_error(
    percent: Any,
    limits: LimitsConfig = DEFAULT_LIMITS,
) -> str | None:
    """Validate a yield percentage (``2.5`` means 2.5%)."""
    reason = _numeric_error(percent, "Percentage")
    if reason is not None:
        return reason

    value = to_decimal(percent)
    if value < limits.min_yield_percent:
        return f"Percentage must be at least {limits.min_yield_percent:.2f}%"
    if value > limits.max_yield_percent:
        return f"Percentage cannot exceed {limits.max_yield_percent:.2f}%"
    return None
