# src/finsim/persist/__init__.py
"""
Snapshot model and reference stores for saving and restoring a game.

The engine itself never touches storage; callers hand it a `StateStore`.
"""

from .models import GameSnapshot
from .store import FileStateStore, InMemoryStateStore, StateStore

__all__ = ["GameSnapshot", "StateStore", "FileStateStore", "InMemoryStateStore"]
