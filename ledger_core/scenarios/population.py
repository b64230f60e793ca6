"""Population scenario: fill a ledger with synthetic clients and activity."""

import random
from decimal import Decimal

from ledger_core.config import LedgerConfig
from ledger_core.exceptions import LedgerError
from ledger_core.generators import AccountGenerator, ClientGenerator, FakerPool
from ledger_core.logging import get_logger
from ledger_core.service import LedgerService

logger = get_logger(__name__)


class PopulationScenario:
    """Register clients and accounts, then run random operations.

    Everything goes through the public ``LedgerService`` API, so the same
    validation applies as for any other caller. Operations the ledger
    rejects (for example a withdrawal above the balance) are counted in
    ``rejected``.
    """

    OPERATIONS = ["deposit", "withdraw", "transfer"]
    OPERATION_WEIGHTS = [0.45, 0.35, 0.20]

    # Per-operation amounts, in currency units
    AMOUNT_RANGE = (1, 5000)

    def __init__(
        self,
        num_clients: int = 20,
        operations_per_account: int = 5,
        yield_percent: Decimal | None = None,
        seed: int | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        """Initialize the population scenario.

        Parameters
        ----------
        num_clients : int
            Number of clients to register.
        operations_per_account : int
            Average random operations per opened account.
        yield_percent : Decimal | None
            Yield applied to all savings accounts at the end, if set.
        seed : int | None
            Random seed for reproducibility. Defaults to ``config.seed``.
        config : LedgerConfig | None
            Configuration supplying the default seed.
        """
        if seed is None and config is not None:
            seed = config.seed

        self.num_clients = num_clients
        self.operations_per_account = operations_per_account
        self.yield_percent = yield_percent
        self.seed = seed

        pool = FakerPool(seed=seed, pool_sizes={"name": 200, "cpf": max(1000, num_clients * 2)})
        self.client_gen = ClientGenerator(seed=seed, pool=pool)
        self.account_gen = AccountGenerator(seed=seed, pool=pool)

    def run(self, service: LedgerService) -> dict[str, int]:
        """Populate ``service`` and return counts of what was done."""
        logger.info("Starting population scenario: %d clients", self.num_clients)

        summary = {"clients": 0, "accounts": 0, "operations": 0, "rejected": 0}
        numbers: list[int] = []

        for request in self.client_gen.generate_batch(self.num_clients):
            client = service.register_client(request.name, request.cpf)
            summary["clients"] += 1

            for account_request in self.account_gen.generate_for_client(client.cpf):
                account = service.register_account(
                    account_request.cpf,
                    account_request.kind,
                    account_request.initial_balance,
                )
                numbers.append(account.number)
                summary["accounts"] += 1

        for _ in range(len(numbers) * self.operations_per_account):
            try:
                self._random_operation(service, numbers)
                summary["operations"] += 1
            except LedgerError as exc:
                logger.debug("Operation rejected: %s", exc)
                summary["rejected"] += 1

        if self.yield_percent is not None:
            service.apply_yield_to_all_savings(self.yield_percent)

        logger.info(
            "Population complete: %d clients, %d accounts, %d operations (%d rejected)",
            summary["clients"],
            summary["accounts"],
            summary["operations"],
            summary["rejected"],
        )
        return summary

    def _random_operation(self, service: LedgerService, numbers: list[int]) -> None:
        operation = random.choices(self.OPERATIONS, weights=self.OPERATION_WEIGHTS, k=1)[0]
        low, high = self.AMOUNT_RANGE
        amount = Decimal(str(round(random.uniform(low, high), 2)))
        number = random.choice(numbers)

        if operation == "deposit":
            service.deposit(number, amount)
        elif operation == "withdraw":
            service.withdraw(number, amount)
        else:
            service.transfer(number, random.choice(numbers), amount)
