"""Pre-generated value pools for fast synthetic client data.

Names and CPFs are generated once at construction and sampled with
``random.choice()`` afterwards. Every pooled name passes the client name
validator and every pooled CPF passes the checksum validator.

Usage::

    pool = FakerPool(seed=42)
    name = pool.name()          # "Maria Souza"
    cpf  = pool.cpf()           # "529.982.247-25"
    raw  = pool.cpf_raw()       # "52998224725"
"""

from __future__ import annotations

import random

from faker import Faker

from ledger_core.validators.cpf import compute_check_digits, format_cpf
from ledger_core.validators.fields import name_error


def generate_cpf() -> str:
    """Generate a valid CPF (11 digits) using pure arithmetic."""
    while True:
        base = [random.randint(0, 9) for _ in range(9)]
        # 000000000 yields 00000000000, which is rejected as repeated digits
        if len(set(base)) > 1:
            break
    first, second = compute_check_digits(base)
    return "".join(str(d) for d in [*base, first, second])


def generate_cpf_formatted() -> str:
    """Generate a formatted CPF (XXX.XXX.XXX-XX)."""
    return format_cpf(generate_cpf())


class FakerPool:
    """Pre-generated pools of names and CPFs.

    Parameters
    ----------
    locale : str
        Faker locale (default ``pt_BR``).
    seed : int | None
        Random seed for reproducibility.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    """

    DEFAULT_SIZES: dict[str, int] = {
        "name": 2000,
        "cpf": 5000,
    }

    def __init__(
        self,
        locale: str = "pt_BR",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)
            random.seed(seed)

        # first + last name keeps titles ("Dr.", "Sra.") out of the pool
        self._names: list[str] = []
        while len(self._names) < sizes["name"]:
            candidate = f"{fake.first_name()} {fake.last_name()}"
            if name_error(candidate) is None:
                self._names.append(candidate)

        self._cpfs_raw: list[str] = [generate_cpf() for _ in range(sizes["cpf"])]

    def name(self) -> str:
        """Return a random full name."""
        return random.choice(self._names)

    def cpf(self) -> str:
        """Return a random formatted CPF (XXX.XXX.XXX-XX)."""
        return format_cpf(random.choice(self._cpfs_raw))

    def cpf_raw(self) -> str:
        """Return a random unformatted CPF (11 digits)."""
        return random.choice(self._cpfs_raw)

    @property
    def cpf_capacity(self) -> int:
        """Number of distinct CPFs in the pool."""
        return len(set(self._cpfs_raw))
