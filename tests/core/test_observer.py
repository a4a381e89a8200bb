# tests/core/test_observer.py

from typing import Any, List, Tuple

import pytest

# Subject under test
from finsim.core.events import MonthSummary, RandomEventOccurred
from finsim.core.observer import SimulationObserver
from finsim.simulation.engine import FinancialSimulation


class RecordingObserver(SimulationObserver):
    """Records the hooks it receives, ignoring the rest."""

    def __init__(self) -> None:
        self.received: List[Tuple[str, Any]] = []

    def on_location_changed(self, name: str) -> None:
        self.received.append(("location", name))

    def on_month_processed(self, summary: MonthSummary) -> None:
        self.received.append(("month", summary))

    def on_random_event(self, event: RandomEventOccurred) -> None:
        self.received.append(("event", event))

    def on_game_reset(self, _: None) -> None:
        self.received.append(("reset", None))


@pytest.fixture
def observer(engine: FinancialSimulation) -> RecordingObserver:
    recording = RecordingObserver()
    engine.attach_observer(recording)
    return recording


def test_observer_receives_notifications_in_order(engine: FinancialSimulation, observer: RecordingObserver, scripted_rng):
    """Within a month the random event is reported before the month summary."""
    engine.set_location("Rural Area")
    scripted_rng.push(0.0)

    engine.process_month()

    kinds = [kind for kind, _ in observer.received]
    assert kinds == ["location", "event", "month"]
    assert observer.received[0][1] == "Rural Area"
    assert observer.received[1][1].name == "Car Breakdown"
    assert observer.received[2][1].month == 2


def test_unimplemented_hooks_are_no_ops(engine: FinancialSimulation, observer: RecordingObserver):
    """Hooks the observer does not override are silently ignored."""
    engine.improve_skill("education")
    engine.reset_game()

    assert observer.received == [("reset", None)]
