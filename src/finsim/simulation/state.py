# src/finsim/simulation/state.py
"""
Mutable game state owned by the engine: the player and the calendar.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Skills(BaseModel):
    education: int = Field(1, ge=0)
    experience: int = Field(0, ge=0)
    networking: int = Field(1, ge=0)


class Finance(BaseModel):
    salary: int = 0
    # Signed on purpose: a negative balance means the player is broke.
    savings: float = 2000.0
    debt: float = 0.0
    investments: List[Dict[str, Any]] = Field(default_factory=list)


class Expenses(BaseModel):
    """Monthly spending per category. The category set is fixed."""

    model_config = ConfigDict(extra="forbid")

    housing: float = 0.0
    food: float = 0.0
    utilities: float = 0.0
    transportation: float = 0.0
    entertainment: float = 0.0
    other: float = 0.0

    def total(self) -> float:
        return sum(getattr(self, category) for category in EXPENSE_CATEGORIES)


EXPENSE_CATEGORIES: Tuple[str, ...] = tuple(Expenses.model_fields)
SKILL_NAMES: Tuple[str, ...] = tuple(Skills.model_fields)


class Job(BaseModel):
    """The player's current position."""

    title: str
    salary: int
    months_worked: int = Field(0, ge=0)


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int
    year: int
    entry: str


class Player(BaseModel):
    location: Optional[str] = None
    job: Optional[Job] = None
    skills: Skills = Field(default_factory=Skills)
    finance: Finance = Field(default_factory=Finance)
    expenses: Expenses = Field(default_factory=Expenses)
    history: List[HistoryEntry] = Field(default_factory=list)


class Calendar(BaseModel):
    month: int = Field(1, ge=1, le=12)
    year: int = Field(1, ge=1)

    def advance(self) -> None:
        """Moves forward exactly one month, rolling over into the next year."""
        self.month += 1
        if self.month > 12:
            self.month = 1
            self.year += 1
