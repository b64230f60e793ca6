"""In-memory client and account stores.

Each store guards its maps with a single lock. Check-then-insert and
listing happen under that lock, and listings return new lists, so a
caller's snapshot never changes when the store does.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, cast

from ledger_core.exceptions import DuplicateClientError
from ledger_core.models import Account, AccountKind, Client, SavingsAccount


@dataclass(eq=False)
class ClientStore:
    """Clients keyed by normalized CPF, in registration order."""

    _clients: dict[str, Client] = field(default_factory=dict)
    _lock: Any = field(default_factory=threading.RLock, repr=False)

    def add(self, client: Client) -> None:
        """Add a client, rejecting a second client with the same CPF."""
        with self._lock:
            if client.cpf in self._clients:
                raise DuplicateClientError(client.cpf)
            self._clients[client.cpf] = client

    def find_by_cpf(self, cpf: str) -> Client | None:
        """Get a client by normalized CPF."""
        with self._lock:
            return self._clients.get(cpf)

    def exists(self, cpf: str) -> bool:
        with self._lock:
            return cpf in self._clients

    def list_all(self) -> list[Client]:
        """Snapshot of all clients."""
        with self._lock:
            return list(self._clients.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)


@dataclass(eq=False)
class AccountStore:
    """Accounts keyed by number, with a per-owner index."""

    _accounts: dict[int, Account] = field(default_factory=dict)
    _owner_accounts: dict[str, list[int]] = field(default_factory=dict)
    _lock: Any = field(default_factory=threading.RLock, repr=False)

    def add(self, account: Account) -> None:
        """Add an account.

        Numbers come from the service's allocator and are never supplied
        by callers, so uniqueness is not re-checked here.
        """
        with self._lock:
            self._accounts[account.number] = account
            self._owner_accounts.setdefault(account.owner_cpf, []).append(account.number)

    def find_by_number(self, number: int) -> Account | None:
        with self._lock:
            return self._accounts.get(number)

    def exists(self, number: int) -> bool:
        with self._lock:
            return number in self._accounts

    def list_all(self) -> list[Account]:
        """Snapshot of all accounts in creation order."""
        with self._lock:
            return list(self._accounts.values())

    def list_by_balance_descending(self) -> list[Account]:
        """Snapshot sorted by balance, highest first; ties keep creation order."""
        with self._lock:
            return sorted(self._accounts.values(), key=lambda a: a.balance, reverse=True)

    def list_savings_accounts(self) -> list[SavingsAccount]:
        """Snapshot of savings accounts only."""
        with self._lock:
            return [
                cast(SavingsAccount, account)
                for account in self._accounts.values()
                if account.kind is AccountKind.SAVINGS
            ]

    def list_by_owner(self, cpf: str) -> list[Account]:
        """Snapshot of the accounts owned by one client."""
        with self._lock:
            numbers = self._owner_accounts.get(cpf, [])
            return [self._accounts[n] for n in numbers]

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
