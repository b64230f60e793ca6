"""Account models: checking and savings.

Balances are ``Decimal``. Every mutating method validates its input
before touching state, then checks the account invariant
(``number > 0``, balance finite and non-negative) before and after the
change. A broken invariant raises ``InvariantViolationError``, which is
never caused by caller input.

Each account owns a re-entrant lock; operations on one account are
serialized. ``transfer`` takes both locks in ascending account-number
order, so two opposite transfers between the same pair cannot deadlock.
"""

from __future__ import annotations

import threading
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Any, ClassVar

from ledger_core.config import DEFAULT_LIMITS, LimitsConfig
from ledger_core.exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidInitialBalanceError,
    InvalidPercentError,
    InvariantViolationError,
    SameAccountError,
)
from ledger_core.models.client import Client
from ledger_core.models.enums import AccountKind
from ledger_core.validators.fields import (
    initial_balance_error,
    operation_amount_error,
    to_decimal,
    yield_percent_error,
)

# Yield credits are rounded to whole cents
YIELD_QUANTUM = Decimal("0.01")


class Account:
    """Base bank account. Use ``CheckingAccount`` or ``SavingsAccount``."""

    kind: ClassVar[AccountKind]

    def __init__(
        self,
        number: int,
        client: Client,
        initial_balance: Any,
        limits: LimitsConfig = DEFAULT_LIMITS,
    ) -> None:
        if client is None:
            raise ValueError("Account requires a client")
        if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
            raise ValueError(f"Account number must be a positive integer, got {number!r}")

        reason = initial_balance_error(initial_balance, limits)
        if reason is not None:
            raise InvalidInitialBalanceError(reason)

        self._number = number
        self._owner_cpf = client.cpf
        self._holder_name = client.name
        self._balance: Decimal = to_decimal(initial_balance)
        self._limits = limits
        self._lock = threading.RLock()

        self._ensure_invariant()

    @property
    def number(self) -> int:
        return self._number

    @property
    def owner_cpf(self) -> str:
        """Normalized CPF of the owning client (lookup key, not a reference)."""
        return self._owner_cpf

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def label(self) -> str:
        return self.kind.label

    @property
    def supports_yield(self) -> bool:
        return self.kind.supports_yield

    def check_invariant(self) -> str | None:
        """Return a description of the broken invariant, or ``None``."""
        if self._number <= 0:
            return f"account number must be positive, got {self._number}"
        if not isinstance(self._balance, Decimal):
            return f"balance must be a Decimal, got {type(self._balance).__name__}"
        if not self._balance.is_finite():
            return f"balance must be finite, got {self._balance}"
        if self._balance < 0:
            return f"balance cannot be negative, got {self._balance}"
        return None

    def _ensure_invariant(self) -> None:
        reason = self.check_invariant()
        if reason is not None:
            raise InvariantViolationError(f"Account {self._number}: {reason}")

    def _validated_amount(self, amount: Any, label: str) -> Decimal:
        reason = operation_amount_error(amount, label, self._limits)
        if reason is not None:
            raise InvalidAmountError(reason)
        return to_decimal(amount)

    def _credit(self, value: Decimal) -> Decimal:
        # Caller holds the lock and has validated ``value``
        self._ensure_invariant()
        self._balance += value
        self._ensure_invariant()
        return self._balance

    def _debit(self, value: Decimal) -> Decimal:
        self._ensure_invariant()
        if value > self._balance:
            raise InsufficientBalanceError(self._number, self._balance, value)
        self._balance -= value
        self._ensure_invariant()
        return self._balance

    def deposit(self, amount: Any) -> Decimal:
        """Add ``amount`` to the balance and return the new balance.

        Raises
        ------
        InvalidAmountError
            If the amount is not a number, not finite, negative, below the
            minimum or above the per-operation ceiling.
        """
        value = self._validated_amount(amount, "Deposit amount")
        with self._lock:
            return self._credit(value)

    def withdraw(self, amount: Any) -> Decimal:
        """Take ``amount`` from the balance and return the new balance.

        Raises
        ------
        InvalidAmountError
            If the amount is rejected by the validator.
        InsufficientBalanceError
            If ``amount`` exceeds the current balance.
        """
        value = self._validated_amount(amount, "Withdraw amount")
        with self._lock:
            return self._debit(value)

    def transfer(self, target: Account, amount: Any) -> None:
        """Move ``amount`` from this account to ``target``.

        The amount is validated once, up front. With the amount cleared,
        crediting the target has no remaining failure mode; should it raise
        anyway, both balances are put back before the error propagates.

        Raises
        ------
        SameAccountError
            If ``target`` is this account.
        InvalidAmountError
            If the amount is rejected by the validator.
        InsufficientBalanceError
            If ``amount`` exceeds this account's balance.
        """
        if target is None:
            raise ValueError("Transfer requires a target account")
        if target is self or target.number == self._number:
            raise SameAccountError(self._number)

        value = self._validated_amount(amount, "Transfer amount")

        first, second = sorted((self, target), key=lambda account: account.number)
        with first._lock, second._lock:
            target._ensure_invariant()
            source_before, target_before = self._balance, target._balance
            self._debit(value)
            try:
                target._credit(value)
            except Exception:
                self._balance = source_before
                target._balance = target_before
                raise

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._number == other._number

    def __hash__(self) -> int:
        return hash(self._number)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(number={self._number}, "
            f"owner_cpf={self._owner_cpf!r}, balance={self.balance!r})"
        )


class CheckingAccount(Account):
    """Checking account. No yield."""

    kind = AccountKind.CHECKING


class SavingsAccount(Account):
    """Savings account with percentage yield."""

    kind = AccountKind.SAVINGS

    def apply_yield(self, percent: Any) -> Decimal:
        """Credit ``balance * percent / 100`` and return the new balance.

        The credit is rounded half-even to whole cents, so repeated yields
        never grow the balance beyond cent precision.

        Raises
        ------
        InvalidPercentError
            If ``percent`` is not a finite number within the yield limits.
        """
        reason = yield_percent_error(percent, self._limits)
        if reason is not None:
            raise InvalidPercentError(reason)
        rate = to_decimal(percent) / 100

        with self._lock:
            self._ensure_invariant()
            credit = (self._balance * rate).quantize(YIELD_QUANTUM, rounding=ROUND_HALF_EVEN)
            self._balance += credit
            self._ensure_invariant()
            return self._balance
