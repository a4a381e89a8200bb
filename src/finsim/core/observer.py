# src/finsim/core/observer.py

from typing import TYPE_CHECKING, List

from .events import (
    ExpenseUpdated,
    GameEvent,
    JobOffer,
    MonthSummary,
    RaiseGranted,
    RandomEventOccurred,
    SkillImproved,
)

if TYPE_CHECKING:
    from finsim.persist.models import GameSnapshot
    from finsim.simulation.state import Job

    from .event_bus import EventBus


class SimulationObserver:
    """
    Base class for anything that wants to follow a game, such as a UI or a
    logger. Override only the hooks you need; the rest do nothing.
    """

    def on_location_changed(self, name: str) -> None:
        pass

    def on_jobs_available(self, offers: List[JobOffer]) -> None:
        pass

    def on_job_accepted(self, job: "Job") -> None:
        pass

    def on_got_raise(self, details: RaiseGranted) -> None:
        pass

    def on_month_processed(self, summary: MonthSummary) -> None:
        pass

    def on_random_event(self, event: RandomEventOccurred) -> None:
        pass

    def on_expense_updated(self, update: ExpenseUpdated) -> None:
        pass

    def on_skill_improved(self, improvement: SkillImproved) -> None:
        pass

    def on_game_loaded(self, snapshot: "GameSnapshot") -> None:
        pass

    def on_game_reset(self, _: None) -> None:
        pass

    def attach(self, event_bus: "EventBus") -> None:
        """Subscribes every hook of this observer to its notification."""
        event_bus.subscribe(GameEvent.LOCATION_CHANGED, self.on_location_changed)
        event_bus.subscribe(GameEvent.JOBS_AVAILABLE, self.on_jobs_available)
        event_bus.subscribe(GameEvent.JOB_ACCEPTED, self.on_job_accepted)
        event_bus.subscribe(GameEvent.GOT_RAISE, self.on_got_raise)
        event_bus.subscribe(GameEvent.MONTH_PROCESSED, self.on_month_processed)
        event_bus.subscribe(GameEvent.RANDOM_EVENT, self.on_random_event)
        event_bus.subscribe(GameEvent.EXPENSE_UPDATED, self.on_expense_updated)
        event_bus.subscribe(GameEvent.SKILL_IMPROVED, self.on_skill_improved)
        event_bus.subscribe(GameEvent.GAME_LOADED, self.on_game_loaded)
        event_bus.subscribe(GameEvent.GAME_RESET, self.on_game_reset)
