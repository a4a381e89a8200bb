# src/finsim/core/__init__.py

from .event_bus import EventBus, EventHandler
from .events import (
    EVENT_PAYLOAD_TYPES,
    ExpenseUpdated,
    GameEvent,
    JobOffer,
    MonthSummary,
    RaiseGranted,
    RandomEventOccurred,
    SkillImproved,
)
from .observer import SimulationObserver

__all__ = [
    "EVENT_PAYLOAD_TYPES",
    "EventBus",
    "EventHandler",
    "ExpenseUpdated",
    "GameEvent",
    "JobOffer",
    "MonthSummary",
    "RaiseGranted",
    "RandomEventOccurred",
    "SimulationObserver",
    "SkillImproved",
]
