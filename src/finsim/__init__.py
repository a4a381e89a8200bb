# src/finsim/__init__.py
"""
An educational financial-literacy simulation.

A single in-memory engine models a player's career, income, expenses, skills
and random financial events month by month. UIs, CLIs and storage backends
drive it through its public operations and follow it through notifications.
"""

from .config import SimulationConfig, load_config
from .core import GameEvent, SimulationObserver
from .persist import FileStateStore, GameSnapshot, InMemoryStateStore, StateStore
from .simulation.engine import FinancialSimulation, LocationNotSetError, MonthOutcome

__all__ = [
    "FileStateStore",
    "FinancialSimulation",
    "GameEvent",
    "GameSnapshot",
    "InMemoryStateStore",
    "LocationNotSetError",
    "MonthOutcome",
    "SimulationConfig",
    "SimulationObserver",
    "StateStore",
    "load_config",
]
