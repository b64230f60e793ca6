"""Synthetic data generators for populating a ledger."""

from ledger_core.generators.account import AccountGenerator, AccountRequest
from ledger_core.generators.client import ClientGenerator, ClientRequest
from ledger_core.generators.pool import FakerPool

__all__ = [
    "AccountGenerator",
    "AccountRequest",
    "ClientGenerator",
    "ClientRequest",
    "FakerPool",
]
