"""Scenarios that drive a ledger with synthetic activity."""

from ledger_core.scenarios.population import PopulationScenario

__all__ = ["PopulationScenario"]
