# src/finsim/core/events.py
"""
Notification names emitted by the engine and the payload carried by each.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict

from finsim.persist.models import GameSnapshot
from finsim.simulation.state import Job


class GameEvent(str, Enum):
    LOCATION_CHANGED = "locationChanged"
    JOBS_AVAILABLE = "jobsAvailable"
    JOB_ACCEPTED = "jobAccepted"
    GOT_RAISE = "gotRaise"
    MONTH_PROCESSED = "monthProcessed"
    RANDOM_EVENT = "randomEvent"
    EXPENSE_UPDATED = "expenseUpdated"
    SKILL_IMPROVED = "skillImproved"
    GAME_LOADED = "gameLoaded"
    GAME_RESET = "gameReset"


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)


class JobOffer(_Payload):
    """A catalog job that turned up in this round of job hunting."""

    title: str
    education_requirement: int
    experience_requirement: int
    base_salary: int
    description: str
    adjusted_salary: int


class RaiseGranted(_Payload):
    old_salary: int
    new_salary: int
    raise_percent: float


class MonthSummary(_Payload):
    month: int
    year: int
    income: int
    expenses: float
    savings: float
    is_broke: bool


class RandomEventOccurred(_Payload):
    name: str
    description: str
    cost: float


class ExpenseUpdated(_Payload):
    category: str
    amount: float
    total_expenses: float


class SkillImproved(_Payload):
    skill: str
    new_level: int
    cost: int


# The payload type each notification must carry. `jobsAvailable` carries a
# list of JobOffer and `gameReset` carries None.
EVENT_PAYLOAD_TYPES: Mapping[GameEvent, type] = MappingProxyType(
    {
        GameEvent.LOCATION_CHANGED: str,
        GameEvent.JOBS_AVAILABLE: list,
        GameEvent.JOB_ACCEPTED: Job,
        GameEvent.GOT_RAISE: RaiseGranted,
        GameEvent.MONTH_PROCESSED: MonthSummary,
        GameEvent.RANDOM_EVENT: RandomEventOccurred,
        GameEvent.EXPENSE_UPDATED: ExpenseUpdated,
        GameEvent.SKILL_IMPROVED: SkillImproved,
        GameEvent.GAME_LOADED: GameSnapshot,
        GameEvent.GAME_RESET: type(None),
    }
)
