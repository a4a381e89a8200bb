# src/finsim/persist/models.py

from pydantic import BaseModel, ConfigDict, Field, model_validator

from finsim.simulation.state import Player
from finsim.world.catalogs import JOB_TYPES, LOCATIONS


class GameSnapshot(BaseModel):
    """
    The top-level data model representing a complete, serializable copy of
    the engine's state.
    """

    model_config = ConfigDict(extra="forbid")

    player: Player = Field(..., description="The player's full state, including history.")
    month: int = Field(..., ge=1, le=12, description="The calendar month, 1-12.")
    year: int = Field(..., ge=1, description="The calendar year, starting at 1.")
    difficulty: str = Field(..., description="The difficulty label the game was started with.")

    @model_validator(mode="after")
    def _check_catalog_references(self) -> "GameSnapshot":
        location = self.player.location
        if location is not None and location not in LOCATIONS:
            raise ValueError(f"Unknown location '{location}'")
        job = self.player.job
        if job is not None and job.title not in JOB_TYPES:
            raise ValueError(f"Unknown job title '{job.title}'")
        return self
