# src/finsim/config/schemas.py
"""
The pydantic model for engine configuration: how a new game starts and how
the engine draws randomness and logs.
"""

from typing import Optional

from pydantic import BaseModel, Field


class InitialSkillsConfig(BaseModel):
    education: int = Field(1, ge=0)
    experience: int = Field(0, ge=0)
    networking: int = Field(1, ge=0)


class SimulationConfig(BaseModel):
    starting_savings: float = 2000.0
    initial_skills: InitialSkillsConfig = Field(default_factory=InitialSkillsConfig)
    start_month: int = Field(1, ge=1, le=12)
    start_year: int = Field(1, ge=1)
    difficulty: str = "normal"
    random_seed: Optional[int] = None
    enable_debug_logging: bool = False
