"""Pytest configuration and fixtures."""

import pytest

from ledger_core.models import CheckingAccount, Client, SavingsAccount
from ledger_core.service import LedgerService


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def valid_cpf() -> str:
    """A checksum-valid CPF, digits only."""
    return "52998224725"


@pytest.fixture
def formatted_cpf() -> str:
    """The same CPF with punctuation."""
    return "529.982.247-25"


@pytest.fixture
def other_cpf() -> str:
    """A second checksum-valid CPF."""
    return "11144477735"


@pytest.fixture
def client(valid_cpf: str) -> Client:
    """Sample client."""
    return Client("Ana Silva", valid_cpf)


@pytest.fixture
def other_client(other_cpf: str) -> Client:
    """Second sample client."""
    return Client("Bruno Costa", other_cpf)


@pytest.fixture
def checking(client: Client) -> CheckingAccount:
    """Checking account number 1001 with balance 500."""
    return CheckingAccount(1001, client, "500.00")


@pytest.fixture
def savings(other_client: Client) -> SavingsAccount:
    """Savings account number 1002 with balance 1000."""
    return SavingsAccount(1002, other_client, "1000.00")


@pytest.fixture
def service() -> LedgerService:
    """Fresh ledger service for each test."""
    return LedgerService()
