"""Ledger domain models."""

from ledger_core.models.account import Account, CheckingAccount, SavingsAccount
from ledger_core.models.client import Client
from ledger_core.models.enums import AccountKind
from ledger_core.models.report import ConsolidationReport, KindTotals

__all__ = [
    "Account",
    "AccountKind",
    "CheckingAccount",
    "Client",
    "ConsolidationReport",
    "KindTotals",
    "SavingsAccount",
]
