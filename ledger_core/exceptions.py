"""Custom exception hierarchy for the ledger."""

from decimal import Decimal


class LedgerError(Exception):
    """Base exception for all ledger errors."""


class ValidationError(LedgerError):
    """Raised when caller-supplied data is rejected."""


class InvalidNameError(ValidationError):
    """Raised when a client name is empty, too short/long or not letters."""


class InvalidCpfError(ValidationError):
    """Raised when a CPF is malformed or fails its checksum."""


class InvalidAccountKindError(ValidationError):
    """Raised when an account kind is not one of the supported kinds."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Invalid account kind: {kind!r}. Use 'checking' or 'savings'")


class InvalidInitialBalanceError(ValidationError):
    """Raised when an opening balance is out of range or not a number."""


class InvalidAmountError(ValidationError):
    """Raised when a deposit/withdraw/transfer amount is rejected."""


class InvalidPercentError(ValidationError):
    """Raised when a yield percentage is rejected."""


class SameAccountError(ValidationError):
    """Raised when a transfer names the same account on both sides."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Cannot transfer from account {number} to itself")


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class ClientNotFoundError(EntityNotFoundError):
    """Raised when no client is registered under a CPF."""

    def __init__(self, cpf: str) -> None:
        self.cpf = cpf
        super().__init__(f"Client with CPF {cpf} not found")


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account carries the requested number."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Account {number} not found")


class DuplicateClientError(LedgerError):
    """Raised when a client with the same CPF is already registered."""

    def __init__(self, cpf: str) -> None:
        self.cpf = cpf
        super().__init__(f"Client with CPF {cpf} already exists")


class InsufficientBalanceError(LedgerError):
    """Raised when a withdrawal exceeds the account balance."""

    def __init__(self, number: int, balance: Decimal, amount: Decimal) -> None:
        self.number = number
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"Insufficient balance in account {number}: "
            f"balance {balance:.2f}, requested {amount:.2f}"
        )


class YieldApplicationError(LedgerError):
    """Raised when bulk yield stops part-way.

    ``updated`` counts the savings accounts credited before ``cause`` was
    raised; those credits are kept.
    """

    def __init__(self, updated: int, cause: LedgerError) -> None:
        self.updated = updated
        self.cause = cause
        super().__init__(f"Yield stopped after {updated} account(s): {cause}")


class InvariantViolationError(LedgerError):
    """Raised when an entity is found in an internally inconsistent state."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
