"""Client model."""

from dataclasses import dataclass, field

from ledger_core.exceptions import InvalidNameError
from ledger_core.validators.cpf import format_cpf, validate_cpf
from ledger_core.validators.fields import name_error


@dataclass(frozen=True)
class Client:
    """Bank client, identified by CPF.

    ``name`` is stored trimmed and ``cpf`` normalized to 11 digits. Equality
    and hashing use the CPF only, so the same person registered with a
    differently punctuated CPF compares equal.
    """

    name: str = field(compare=False)
    cpf: str

    def __post_init__(self) -> None:
        reason = name_error(self.name)
        if reason is not None:
            raise InvalidNameError(reason)
        cpf = validate_cpf(self.cpf)

        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "cpf", cpf)

    @property
    def formatted_cpf(self) -> str:
        """CPF as ``XXX.XXX.XXX-XX``."""
        return format_cpf(self.cpf)

    def __str__(self) -> str:
        return f"{self.name} ({self.formatted_cpf})"
