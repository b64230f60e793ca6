"""Client registration request generator."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

from ledger_core.generators.base import BaseGenerator
from ledger_core.validators.cpf import normalize_cpf


@dataclass(frozen=True)
class ClientRequest:
    """Arguments for ``LedgerService.register_client``."""

    name: str
    cpf: str


class ClientGenerator(BaseGenerator):
    """Generate synthetic client registrations.

    About half the CPFs come formatted (``XXX.XXX.XXX-XX``) and half as
    bare digits, since callers send both.
    """

    FORMATTED_RATIO = 0.5

    def generate(self) -> ClientRequest:
        """Generate a single client request."""
        cpf = self.pool.cpf() if random.random() < self.FORMATTED_RATIO else self.pool.cpf_raw()
        return ClientRequest(name=self.pool.name(), cpf=cpf)

    def generate_batch(self, count: int) -> Iterator[ClientRequest]:
        """Generate requests with pairwise distinct CPFs.

        Parameters
        ----------
        count : int
            Number of requests to generate.

        Yields
        ------
        ClientRequest
            Generated requests.
        """
        if count > self.pool.cpf_capacity:
            raise ValueError(
                f"cannot draw {count} distinct CPFs from a pool of {self.pool.cpf_capacity}"
            )

        seen: set[str] = set()
        while len(seen) < count:
            request = self.generate()
            digits = normalize_cpf(request.cpf)
            if digits in seen:
                continue
            seen.add(digits)
            yield request
