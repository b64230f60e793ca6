"""In-memory ledger of clients and checking/savings accounts."""

__version__ = "0.1.0"

from ledger_core.config import LedgerConfig, LimitsConfig
from ledger_core.factory import AccountFactory
from ledger_core.models import (
    Account,
    AccountKind,
    CheckingAccount,
    Client,
    ConsolidationReport,
    KindTotals,
    SavingsAccount,
)
from ledger_core.service import AccountNumberAllocator, LedgerService
from ledger_core.store import AccountStore, ClientStore

__all__ = [
    "Account",
    "AccountFactory",
    "AccountKind",
    "AccountNumberAllocator",
    "AccountStore",
    "CheckingAccount",
    "Client",
    "ClientStore",
    "ConsolidationReport",
    "KindTotals",
    "LedgerConfig",
    "LedgerService",
    "LimitsConfig",
    "SavingsAccount",
]
