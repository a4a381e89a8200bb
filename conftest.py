# finsim/conftest.py
"""
Pytest-wide fixtures for the entire project.
"""

from typing import Iterable, List, Optional

import pytest

from finsim.simulation.engine import FinancialSimulation


# ────────────────────────────────────────────────────────────────────────────────
# 1.  Scripted random source
# ────────────────────────────────────────────────────────────────────────────────
class ScriptedRandom:
    """
    Stands in for numpy's Generator. Replays the given draws in order, then
    keeps returning `default`. Raises if the script runs out and no default
    was given, so tests notice unexpected draws.
    """

    def __init__(self, draws: Iterable[float] = (), default: Optional[float] = None) -> None:
        self._draws: List[float] = list(draws)
        self.default = default
        self.calls = 0

    def push(self, *draws: float) -> None:
        self._draws.extend(draws)

    def random(self) -> float:
        self.calls += 1
        if self._draws:
            return self._draws.pop(0)
        if self.default is None:
            raise AssertionError("ScriptedRandom ran out of draws")
        return self.default

    @property
    def remaining(self) -> int:
        return len(self._draws)


# ────────────────────────────────────────────────────────────────────────────────
# 2.  Engine fixtures
# ────────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    """A scripted source with no default: every draw must be planned."""
    return ScriptedRandom()


@pytest.fixture
def engine(scripted_rng: ScriptedRandom) -> FinancialSimulation:
    """A fresh engine with default config and a scripted random source."""
    return FinancialSimulation(rng=scripted_rng)


@pytest.fixture
def city_engine(engine: FinancialSimulation) -> FinancialSimulation:
    """An engine whose player already lives in the Big City."""
    engine.set_location("Big City")
    return engine


@pytest.fixture
def employed_engine(city_engine: FinancialSimulation, scripted_rng: ScriptedRandom) -> FinancialSimulation:
    """A Big City engine whose player holds an Entry Level Office job."""
    # Salary factor 0.9 + 0.5 * 0.2 = 1.0 -> round(30000 * 1.3 * 1.05) = 40950
    scripted_rng.push(0.5)
    city_engine.accept_job("Entry Level Office")
    return city_engine


@pytest.fixture
def make_rng():
    """Factory for extra scripted sources, e.g. ``make_rng([0.1], default=0.0)``."""
    return ScriptedRandom
