"""Account opening request generator."""

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from ledger_core.generators.base import BaseGenerator
from ledger_core.models import AccountKind


@dataclass(frozen=True)
class AccountRequest:
    """Arguments for ``LedgerService.register_account``."""

    cpf: str
    kind: AccountKind
    initial_balance: Decimal


class AccountGenerator(BaseGenerator):
    """Generate synthetic account openings.

    - CHECKING: most common (~70%)
    - SAVINGS: ~30%
    """

    ACCOUNT_KINDS = list(AccountKind)
    ACCOUNT_KIND_WEIGHTS = [0.70, 0.30]

    # Opening balances, in currency units
    BALANCE_RANGE = (0, 20000)

    def generate(self, cpf: str) -> AccountRequest:
        """Generate one account request for a client."""
        kind = random.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]
        return self._generate_one(cpf, kind)

    def generate_for_client(self, cpf: str) -> Iterator[AccountRequest]:
        """Generate one to three account requests for a client."""
        num_accounts = random.choices([1, 2, 3], weights=[0.6, 0.3, 0.1], k=1)[0]

        for i in range(num_accounts):
            kind = random.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]
            # A second account is usually savings
            if i > 0 and kind == AccountKind.CHECKING:
                kind = AccountKind.SAVINGS
            yield self._generate_one(cpf, kind)

    def _generate_one(self, cpf: str, kind: AccountKind) -> AccountRequest:
        low, high = self.BALANCE_RANGE
        balance = Decimal(str(round(random.uniform(low, high), 2)))
        return AccountRequest(cpf=cpf, kind=kind, initial_balance=balance)
