"""Tests for scenarios."""

import logging
from decimal import ROUND_HALF_EVEN, Decimal

import pytest

from ledger_core.config import LedgerConfig
from ledger_core.models import AccountKind
from ledger_core.scenarios import PopulationScenario
from ledger_core.service import LedgerService


class TestPopulationScenario:
    """Tests for PopulationScenario."""

    def test_run(self, seed: int, service: LedgerService) -> None:
        """Test scenario populates the ledger."""
        summary = PopulationScenario(num_clients=10, operations_per_account=4, seed=seed).run(
            service
        )

        assert summary["clients"] == 10
        assert len(service.list_clients()) == 10
        assert summary["accounts"] == len(service.list_accounts())
        assert 10 <= summary["accounts"] <= 30
        assert summary["operations"] + summary["rejected"] == summary["accounts"] * 4

    def test_account_numbers_contiguous(self, seed: int, service: LedgerService) -> None:
        summary = PopulationScenario(num_clients=5, seed=seed).run(service)

        numbers = [a.number for a in service.list_accounts()]
        assert numbers == list(range(1001, 1001 + summary["accounts"]))

    def test_balances_stay_valid(self, seed: int, service: LedgerService) -> None:
        PopulationScenario(num_clients=15, operations_per_account=10, seed=seed).run(service)

        for account in service.list_accounts():
            assert account.check_invariant() is None
            assert account.balance >= 0

    def test_every_client_has_account(self, seed: int, service: LedgerService) -> None:
        PopulationScenario(num_clients=8, seed=seed).run(service)

        for client in service.list_clients():
            assert service.accounts_of(client.cpf)

    def test_yield_applied(self, seed: int) -> None:
        """Test yield at the end grows savings balances."""
        plain = LedgerService()
        PopulationScenario(num_clients=10, operations_per_account=0, seed=seed).run(plain)

        service = LedgerService()
        PopulationScenario(
            num_clients=10, operations_per_account=0, yield_percent=Decimal("10"), seed=seed
        ).run(service)

        def with_yield(balance: Decimal) -> Decimal:
            return balance + (balance / 10).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)

        expected = {
            a.number: with_yield(a.balance) if a.kind is AccountKind.SAVINGS else a.balance
            for a in plain.list_accounts()
        }
        assert {a.number: a.balance for a in service.list_accounts()} == expected

    def test_reproducible(self, seed: int) -> None:
        first, second = LedgerService(), LedgerService()

        PopulationScenario(num_clients=6, seed=seed).run(first)
        PopulationScenario(num_clients=6, seed=seed).run(second)

        assert [c.cpf for c in first.list_clients()] == [c.cpf for c in second.list_clients()]
        assert [a.balance for a in first.list_accounts()] == [
            a.balance for a in second.list_accounts()
        ]

    def test_logs_summary(
        self, seed: int, service: LedgerService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="ledger_core"):
            PopulationScenario(num_clients=3, seed=seed).run(service)

        assert "Population complete: 3 clients" in caplog.text

    def test_seed_from_config(self) -> None:
        config = LedgerConfig(seed=7)

        assert PopulationScenario(num_clients=2, config=config).seed == 7
        assert PopulationScenario(num_clients=2, seed=3, config=config).seed == 3

    def test_config_seed_reproducible(self) -> None:
        config = LedgerConfig(seed=11)
        first, second = LedgerService(config=config), LedgerService(config=config)

        PopulationScenario(num_clients=4, config=config).run(first)
        PopulationScenario(num_clients=4, config=config).run(second)

        assert [c.cpf for c in first.list_clients()] == [c.cpf for c in second.list_clients()]
