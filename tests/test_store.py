"""Tests for ClientStore and AccountStore."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from ledger_core.exceptions import DuplicateClientError
from ledger_core.models import CheckingAccount, Client, SavingsAccount
from ledger_core.store import AccountStore, ClientStore


@pytest.fixture
def client_store() -> ClientStore:
    """Create a fresh client store for each test."""
    return ClientStore()


@pytest.fixture
def account_store() -> AccountStore:
    """Create a fresh account store for each test."""
    return AccountStore()


class TestClientStore:
    """Tests for ClientStore."""

    def test_add_and_find(self, client_store: ClientStore, client: Client) -> None:
        client_store.add(client)

        assert client_store.find_by_cpf(client.cpf) is client
        assert client_store.exists(client.cpf)
        assert len(client_store) == 1

    def test_find_missing(self, client_store: ClientStore) -> None:
        assert client_store.find_by_cpf("52998224725") is None
        assert not client_store.exists("52998224725")

    def test_duplicate_rejected(
        self, client_store: ClientStore, valid_cpf: str, formatted_cpf: str
    ) -> None:
        client_store.add(Client("Ana Silva", valid_cpf))

        with pytest.raises(DuplicateClientError) as exc_info:
            client_store.add(Client("Ana Souza", formatted_cpf))

        assert exc_info.value.cpf == valid_cpf
        assert client_store.find_by_cpf(valid_cpf).name == "Ana Silva"
        assert len(client_store) == 1

    def test_list_all_is_snapshot(
        self, client_store: ClientStore, client: Client, other_client: Client
    ) -> None:
        client_store.add(client)
        snapshot = client_store.list_all()

        client_store.add(other_client)
        snapshot.clear()

        assert client_store.list_all() == [client, other_client]

    def test_concurrent_duplicate_adds(self, client_store: ClientStore, valid_cpf: str) -> None:
        def attempt(_: int) -> bool:
            try:
                client_store.add(Client("Ana Silva", valid_cpf))
            except DuplicateClientError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(50)))

        assert results.count(True) == 1
        assert len(client_store) == 1


class TestAccountStore:
    """Tests for AccountStore."""

    def test_add_and_find(self, account_store: AccountStore, checking: CheckingAccount) -> None:
        account_store.add(checking)

        assert account_store.find_by_number(1001) is checking
        assert account_store.exists(1001)
        assert not account_store.exists(9999)
        assert account_store.find_by_number(9999) is None
        assert len(account_store) == 1

    def test_list_all_in_creation_order(
        self,
        account_store: AccountStore,
        checking: CheckingAccount,
        savings: SavingsAccount,
    ) -> None:
        account_store.add(savings)
        account_store.add(checking)

        assert [a.number for a in account_store.list_all()] == [1002, 1001]

    def test_list_all_is_snapshot(self, account_store: AccountStore, checking: CheckingAccount) -> None:
        snapshot = account_store.list_all()
        account_store.add(checking)

        assert snapshot == []
        assert account_store.list_all() == [checking]

    def test_list_by_balance_descending(self, account_store: AccountStore, client: Client) -> None:
        balances = ["10", "500", "0", "250.50", "500", "99.99"]
        for number, balance in enumerate(balances, start=1001):
            account_store.add(CheckingAccount(number, client, balance))

        ordered = account_store.list_by_balance_descending()
        values = [a.balance for a in ordered]

        assert values == sorted(values, reverse=True)
        assert values[0] == Decimal("500")
        # Equal balances keep creation order
        assert [a.number for a in ordered[:2]] == [1002, 1005]

    def test_list_by_balance_reflects_mutation(
        self,
        account_store: AccountStore,
        checking: CheckingAccount,
        savings: SavingsAccount,
    ) -> None:
        account_store.add(checking)
        account_store.add(savings)

        checking.deposit(1000)

        assert account_store.list_by_balance_descending()[0] is checking

    def test_list_savings_accounts(
        self,
        account_store: AccountStore,
        checking: CheckingAccount,
        savings: SavingsAccount,
    ) -> None:
        account_store.add(checking)
        account_store.add(savings)

        assert account_store.list_savings_accounts() == [savings]

    def test_list_by_owner(
        self,
        account_store: AccountStore,
        client: Client,
        checking: CheckingAccount,
        savings: SavingsAccount,
    ) -> None:
        second = SavingsAccount(1003, client, 0)
        account_store.add(checking)
        account_store.add(savings)
        account_store.add(second)

        assert account_store.list_by_owner(client.cpf) == [checking, second]
        assert account_store.list_by_owner("11122233396") == []
