"""Tests for AccountFactory."""

from decimal import Decimal

import pytest

from ledger_core.config import LimitsConfig
from ledger_core.exceptions import InvalidAccountKindError, InvalidInitialBalanceError
from ledger_core.factory import AccountFactory
from ledger_core.models import AccountKind, CheckingAccount, Client, SavingsAccount


class TestAccountFactory:
    """Tests for account creation by kind."""

    @pytest.mark.parametrize("kind", ["checking", "Checking", " CHECKING ", AccountKind.CHECKING])
    def test_checking(self, client: Client, kind: object) -> None:
        account = AccountFactory().create(1001, client, kind, "10")

        assert isinstance(account, CheckingAccount)
        assert account.kind is AccountKind.CHECKING
        assert account.balance == Decimal("10")

    @pytest.mark.parametrize("kind", ["savings", "SAVINGS", AccountKind.SAVINGS])
    def test_savings(self, client: Client, kind: object) -> None:
        account = AccountFactory().create(1002, client, kind, 0)
        assert isinstance(account, SavingsAccount)

    @pytest.mark.parametrize("kind", ["", "   ", None, "corrente", "investment"])
    def test_invalid_kind(self, client: Client, kind: object) -> None:
        with pytest.raises(InvalidAccountKindError) as exc_info:
            AccountFactory().create(1001, client, kind, 0)
        assert exc_info.value.kind == kind

    def test_invalid_initial_balance(self, client: Client) -> None:
        with pytest.raises(InvalidInitialBalanceError):
            AccountFactory().create(1001, client, "checking", -5)

    def test_limits_passed_to_account(self, client: Client) -> None:
        factory = AccountFactory(LimitsConfig(max_initial_balance=Decimal("100")))

        with pytest.raises(InvalidInitialBalanceError):
            factory.create(1001, client, "savings", 101)

    def test_every_kind_registered(self) -> None:
        assert set(AccountFactory.ACCOUNT_CLASSES) == set(AccountKind)
        for kind, account_class in AccountFactory.ACCOUNT_CLASSES.items():
            assert account_class.kind is kind

    def test_kind_without_class_rejected(self, client: Client) -> None:
        class CheckingOnlyFactory(AccountFactory):
            ACCOUNT_CLASSES = {AccountKind.CHECKING: CheckingAccount}

        factory = CheckingOnlyFactory()

        assert factory.resolve("checking") is AccountKind.CHECKING
        with pytest.raises(InvalidAccountKindError) as exc_info:
            factory.resolve("savings")
        assert exc_info.value.kind == "savings"
