"""Account construction by kind."""

from typing import Any

from ledger_core.config import DEFAULT_LIMITS, LimitsConfig
from ledger_core.exceptions import InvalidAccountKindError
from ledger_core.models import Account, AccountKind, CheckingAccount, Client, SavingsAccount


class AccountFactory:
    """Map an account kind to its account class.

    ``ACCOUNT_CLASSES`` is the one place to register a new kind.
    """

    ACCOUNT_CLASSES: dict[AccountKind, type[Account]] = {
        AccountKind.CHECKING: CheckingAccount,
        AccountKind.SAVINGS: SavingsAccount,
    }

    def __init__(self, limits: LimitsConfig = DEFAULT_LIMITS) -> None:
        self.limits = limits

    def resolve(self, kind: Any) -> AccountKind:
        """Parse a kind tag ("checking", " SAVINGS ", ...) this factory can build.

        ``LedgerService`` resolves the kind before drawing an account number,
        so a kind with no registered class is rejected without consuming one.

        Raises
        ------
        InvalidAccountKindError
            If ``kind`` is blank, unknown, or has no class in
            ``ACCOUNT_CLASSES``.
        """
        account_kind = AccountKind.parse(kind)
        if account_kind not in self.ACCOUNT_CLASSES:
            raise InvalidAccountKindError(kind)
        return account_kind

    def create(
        self,
        number: int,
        client: Client,
        kind: Any,
        initial_balance: Any,
    ) -> Account:
        """Create an account of the requested kind.

        Parameters
        ----------
        number : int
            Account number drawn from the allocator.
        client : Client
            Owning client.
        kind : AccountKind | str
            ``"checking"`` or ``"savings"``, case-insensitive.
        initial_balance : Decimal | int | float | str
            Opening balance.

        Raises
        ------
        InvalidAccountKindError
            If ``kind`` is blank or unknown.
        InvalidInitialBalanceError
            If the opening balance is rejected.
        """
        account_class = self.ACCOUNT_CLASSES[self.resolve(kind)]
        return account_class(number, client, initial_balance, self.limits)
