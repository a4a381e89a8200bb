# src/finsim/persist/store.py

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .models import GameSnapshot

logger = logging.getLogger(__name__)


class StateStore(ABC):
    """
    Abstract Base Class defining the interface for a game-state store.
    """

    @abstractmethod
    def save(self, snapshot: GameSnapshot) -> None:
        """
        Saves a game snapshot.

        Args:
            snapshot: A GameSnapshot object to be saved.
        """
        raise NotImplementedError

    @abstractmethod
    def load(self) -> GameSnapshot:
        """
        Loads the most recently saved game snapshot.

        Returns:
            A populated GameSnapshot object.
        """
        raise NotImplementedError


class InMemoryStateStore(StateStore):
    """Keeps a private copy of the last saved snapshot in memory."""

    def __init__(self) -> None:
        self._snapshot: Optional[GameSnapshot] = None

    def save(self, snapshot: GameSnapshot) -> None:
        self._snapshot = snapshot.model_copy(deep=True)

    def load(self) -> GameSnapshot:
        if self._snapshot is None:
            raise LookupError("No snapshot has been saved yet.")
        return self._snapshot.model_copy(deep=True)


class FileStateStore(StateStore):
    """
    A single save slot on disk, holding one game as pretty-printed JSON.

    Saving writes a sibling ``.tmp`` file first and swaps it into place, so an
    interrupted save leaves the previous game intact.
    """

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    def save(self, snapshot: GameSnapshot) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        tmp_path.replace(self.file_path)
        logger.info(f"Saved game at month {snapshot.month}, year {snapshot.year} to {self.file_path}")

    def load(self) -> GameSnapshot:
        """
        Reads the saved game back.

        Raises:
            FileNotFoundError: If nothing has been saved to this slot.
            ValueError: If the file is not valid JSON or not a valid game.
        """
        if not self.file_path.is_file():
            raise FileNotFoundError(f"No saved game at: {self.file_path}")

        try:
            snapshot = GameSnapshot.model_validate_json(self.file_path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise ValueError(f"Data validation error when loading snapshot from {self.file_path}: {e}")

        logger.info(f"Loaded game at month {snapshot.month}, year {snapshot.year} from {self.file_path}")
        return snapshot
