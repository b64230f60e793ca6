"""Ledger service: registration, account operations and listings."""

import threading
from decimal import Decimal
from typing import Any

from ledger_core.config import LedgerConfig
from ledger_core.exceptions import (
    AccountNotFoundError,
    ClientNotFoundError,
    InvalidInitialBalanceError,
    InvalidPercentError,
    LedgerError,
    SameAccountError,
    YieldApplicationError,
)
from ledger_core.factory import AccountFactory
from ledger_core.logging import get_logger
from ledger_core.models import (
    Account,
    AccountKind,
    Client,
    ConsolidationReport,
    KindTotals,
    SavingsAccount,
)
from ledger_core.store import AccountStore, ClientStore
from ledger_core.validators.cpf import normalize_cpf
from ledger_core.validators.fields import initial_balance_error, yield_percent_error

logger = get_logger(__name__)


class AccountNumberAllocator:
    """Thread-safe sequential account numbers.

    Parameters
    ----------
    start : int
        First number handed out (default 1001).
    """

    def __init__(self, start: int = 1001) -> None:
        if start < 1:
            raise ValueError(f"start must be positive, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_number(self) -> int:
        """Return the next number; each call gets a distinct one."""
        with self._lock:
            number = self._next
            self._next += 1
            return number

    @property
    def peek(self) -> int:
        """Number the next call will return."""
        with self._lock:
            return self._next


class LedgerService:
    """Entry point for every ledger operation.

    Errors are raised to the caller unchanged; the service neither
    catches nor translates them, except that bulk yield wraps a failure
    in ``YieldApplicationError`` to report partial progress.

    Parameters
    ----------
    clients : ClientStore | None
        Client store (new empty store by default).
    accounts : AccountStore | None
        Account store (new empty store by default).
    config : LedgerConfig | None
        Limits and first account number.
    """

    def __init__(
        self,
        clients: ClientStore | None = None,
        accounts: AccountStore | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        self.clients = clients if clients is not None else ClientStore()
        self.accounts = accounts if accounts is not None else AccountStore()
        self.factory = AccountFactory(self.config.limits)
        self.allocator = AccountNumberAllocator(self.config.first_account_number)

    # Registration

    def register_client(self, name: str, cpf: str) -> Client:
        """Register a new client.

        Raises
        ------
        InvalidNameError
            If the name is rejected.
        InvalidCpfError
            If the CPF is malformed or fails its checksum.
        DuplicateClientError
            If a client with the same normalized CPF exists.
        """
        client = Client(name, cpf)
        self.clients.add(client)
        logger.info(
            "Registered client %s", client.formatted_cpf, extra={"extra": {"cpf": client.cpf}}
        )
        return client

    def register_account(self, cpf: str, kind: Any, initial_balance: Any) -> Account:
        """Open an account for an existing client.

        Everything is validated before a number is drawn, so rejected
        requests never consume account numbers.

        Raises
        ------
        ClientNotFoundError
            If no client has this CPF.
        InvalidAccountKindError
            If ``kind`` is not "checking" or "savings".
        InvalidInitialBalanceError
            If the opening balance is rejected.
        """
        client = self.get_client(cpf)
        account_kind = self.factory.resolve(kind)

        reason = initial_balance_error(initial_balance, self.config.limits)
        if reason is not None:
            raise InvalidInitialBalanceError(reason)

        number = self.allocator.next_number()
        account = self.factory.create(number, client, account_kind, initial_balance)
        self.accounts.add(account)

        logger.info(
            "Opened %s account %d for %s with balance %s",
            account_kind.value,
            number,
            client.formatted_cpf,
            account.balance,
            extra={
                "extra": {
                    "account": number,
                    "kind": account_kind.value,
                    "cpf": client.cpf,
                    "balance": account.balance,
                }
            },
        )
        return account

    # Lookups

    def get_client(self, cpf: str) -> Client:
        """Get a client by CPF, formatted or not."""
        normalized = normalize_cpf(cpf)
        client = self.clients.find_by_cpf(normalized)
        if client is None:
            raise ClientNotFoundError(normalized or str(cpf))
        return client

    def get_account(self, number: int) -> Account:
        account = self.accounts.find_by_number(number)
        if account is None:
            raise AccountNotFoundError(number)
        return account

    def get_balance(self, number: int) -> Decimal:
        return self.get_account(number).balance

    def accounts_of(self, cpf: str) -> list[Account]:
        """Accounts owned by the client with this CPF."""
        client = self.get_client(cpf)
        return self.accounts.list_by_owner(client.cpf)

    # Operations

    def deposit(self, number: int, amount: Any) -> Decimal:
        """Deposit into an account and return its new balance."""
        balance = self.get_account(number).deposit(amount)
        logger.debug("Deposit of %s into account %d", amount, number)
        return balance

    def withdraw(self, number: int, amount: Any) -> Decimal:
        """Withdraw from an account and return its new balance."""
        balance = self.get_account(number).withdraw(amount)
        logger.debug("Withdrawal of %s from account %d", amount, number)
        return balance

    def transfer(self, source: int, target: int, amount: Any) -> None:
        """Transfer between two accounts.

        Raises
        ------
        SameAccountError
            If ``source`` and ``target`` are the same number.
        AccountNotFoundError
            If either account does not exist.
        InvalidAmountError
            If the amount is rejected.
        InsufficientBalanceError
            If the source balance is too low.
        """
        if source == target:
            raise SameAccountError(source)

        source_account = self.get_account(source)
        target_account = self.get_account(target)
        source_account.transfer(target_account, amount)
        logger.debug("Transfer of %s from account %d to %d", amount, source, target)

    def apply_yield_to_all_savings(self, percent: Any) -> int:
        """Apply ``percent`` yield to every savings account.

        The percentage is checked once before any account is touched.
        Accounts are credited one at a time; credits already made are
        kept if a later account fails.

        Returns
        -------
        int
            Number of accounts credited.

        Raises
        ------
        InvalidPercentError
            If ``percent`` is rejected (no account is touched).
        YieldApplicationError
            If an account fails part-way; carries the count credited so
            far and the underlying error.
        """
        reason = yield_percent_error(percent, self.config.limits)
        if reason is not None:
            raise InvalidPercentError(reason)

        updated = 0
        for account in self.accounts.list_savings_accounts():
            try:
                account.apply_yield(percent)
            except LedgerError as exc:
                logger.error(
                    "Yield of %s%% stopped at account %d after %d update(s): %s",
                    percent,
                    account.number,
                    updated,
                    exc,
                    exc_info=True,
                    extra={"extra": {"account": account.number, "updated": updated}},
                )
                raise YieldApplicationError(updated, exc) from exc
            updated += 1

        logger.info(
            "Applied %s%% yield to %d savings account(s)",
            percent,
            updated,
            extra={"extra": {"percent": percent, "updated": updated}},
        )
        return updated

    # Listings

    def list_clients(self) -> list[Client]:
        return self.clients.list_all()

    def list_accounts(self) -> list[Account]:
        return self.accounts.list_all()

    def list_accounts_by_balance(self) -> list[Account]:
        return self.accounts.list_by_balance_descending()

    def list_savings_accounts(self) -> list[SavingsAccount]:
        return self.accounts.list_savings_accounts()

    def consolidation(self) -> ConsolidationReport:
        """Count and total balance per account kind, plus overall totals."""
        counts: dict[AccountKind, int] = {}
        totals: dict[AccountKind, Decimal] = {}

        for account in self.accounts.list_all():
            balance = account.balance
            counts[account.kind] = counts.get(account.kind, 0) + 1
            totals[account.kind] = totals.get(account.kind, Decimal("0")) + balance

        by_kind = {
            kind: KindTotals(count=counts[kind], total_balance=totals[kind])
            for kind in AccountKind
            if kind in counts
        }
        return ConsolidationReport(
            by_kind=by_kind,
            total_count=sum(counts.values()),
            total_balance=sum(totals.values(), Decimal("0")),
        )
