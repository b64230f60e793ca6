"""Pure validators for client and account data."""

from ledger_core.validators.cpf import (
    compute_check_digits,
    cpf_error,
    format_cpf,
    is_valid_cpf,
    normalize_cpf,
    validate_cpf,
)
from ledger_core.validators.fields import (
    initial_balance_error,
    name_error,
    operation_amount_error,
    to_decimal,
    yield_percent_error,
)

__all__ = [
    "compute_check_digits",
    "cpf_error",
    "format_cpf",
    "initial_balance_error",
    "is_valid_cpf",
    "name_error",
    "normalize_cpf",
    "operation_amount_error",
    "to_decimal",
    "validate_cpf",
    "yield_percent_error",
]
