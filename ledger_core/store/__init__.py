"""In-memory stores for clients and accounts."""

from ledger_core.store.memory import AccountStore, ClientStore

__all__ = ["AccountStore", "ClientStore"]
