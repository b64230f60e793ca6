"""Enumeration types for ledger entities."""

from enum import Enum

from ledger_core.exceptions import InvalidAccountKindError


class AccountKind(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"

    @property
    def label(self) -> str:
        """Display name of the kind."""
        return _LABELS[self]

    @property
    def supports_yield(self) -> bool:
        """Whether accounts of this kind accrue percentage yield."""
        return self is AccountKind.SAVINGS

    @classmethod
    def parse(cls, raw: object) -> "AccountKind":
        """Match ``raw`` case-insensitively against the known kinds.

        Raises
        ------
        InvalidAccountKindError
            For ``None``, blank strings and unknown kinds.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidAccountKindError(raw)
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise InvalidAccountKindError(raw) from None


_LABELS = {
    AccountKind.CHECKING: "Checking Account",
    AccountKind.SAVINGS: "Savings Account",
}
