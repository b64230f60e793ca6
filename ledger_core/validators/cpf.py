"""CPF (Brazilian taxpayer ID) checksum validation.

A CPF has 9 base digits followed by 2 check digits. Each check digit is
``11 - (weighted_sum % 11)``, with results of 10 or 11 written as 0. The
first uses weights 10..2 over the base digits, the second weights 11..2
over the base digits plus the first check digit.

Usage::

    validate_cpf("529.982.247-25")   # -> "52998224725"
    format_cpf("52998224725")        # -> "529.982.247-25"
"""

from __future__ import annotations

import re
from typing import Sequence

from ledger_core.exceptions import InvalidCpfError

CPF_LENGTH = 11

# ASCII digits only; str.isdigit() would also accept other scripts
_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_cpf(raw: str | None) -> str:
    """Strip every non-digit character (``None`` becomes ``""``)."""
    if raw is None:
        return ""
    return _NON_DIGITS.sub("", str(raw))


def _check_digit(digits: Sequence[int]) -> int:
    weights = range(len(digits) + 1, 1, -1)
    total = sum(d * w for d, w in zip(digits, weights))
    digit = 11 - (total % 11)
    return 0 if digit >= 10 else digit


def compute_check_digits(base: Sequence[int]) -> tuple[int, int]:
    """Compute both check digits for the 9 base digits of a CPF.

    Parameters
    ----------
    base : Sequence[int]
        The first nine digits.

    Returns
    -------
    tuple[int, int]
        First and second check digit.
    """
    if len(base) != CPF_LENGTH - 2:
        raise ValueError(f"expected {CPF_LENGTH - 2} base digits, got {len(base)}")
    first = _check_digit(base)
    second = _check_digit([*base, first])
    return first, second


def cpf_error(raw: str | None) -> str | None:
    """Return why ``raw`` is not a valid CPF, or ``None`` if it is."""
    if raw is None:
        return "CPF must not be empty"

    cpf = normalize_cpf(raw)
    if len(cpf) != CPF_LENGTH:
        return f"CPF must have {CPF_LENGTH} digits"

    if cpf == cpf[0] * CPF_LENGTH:
        return "CPF cannot have all digits equal"

    digits = [int(c) for c in cpf]
    if (digits[9], digits[10]) != compute_check_digits(digits[:9]):
        return "Invalid CPF: check digits do not match"

    return None


def validate_cpf(raw: str | None) -> str:
    """Validate a CPF and return its normalized 11-digit form.

    Raises
    ------
    InvalidCpfError
        If the CPF is malformed, repeats one digit or fails its checksum.
    """
    reason = cpf_error(raw)
    if reason is not None:
        raise InvalidCpfError(reason)
    return normalize_cpf(raw)


def is_valid_cpf(raw: str | None) -> bool:
    """Check a CPF without raising."""
    return cpf_error(raw) is None


def format_cpf(cpf: str) -> str:
    """Render a normalized CPF as ``XXX.XXX.XXX-XX``."""
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
