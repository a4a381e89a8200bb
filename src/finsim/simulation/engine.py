# src/finsim/simulation/engine.py
"""
The financial-literacy simulation engine.

A single object owns the player, the calendar and the notification registry,
and implements every game rule: choosing where to live, hunting for and
accepting jobs, raises, monthly cash flow, random life events and paid
skill training.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

import numpy as np
from pydantic import ValidationError

from finsim.config.schemas import SimulationConfig
from finsim.core.event_bus import EventBus, EventHandler
from finsim.core.events import (
    ExpenseUpdated,
    GameEvent,
    JobOffer,
    MonthSummary,
    RaiseGranted,
    RandomEventOccurred,
    SkillImproved,
)
from finsim.core.observer import SimulationObserver
from finsim.persist.models import GameSnapshot
from finsim.persist.store import StateStore
from finsim.simulation.state import (
    EXPENSE_CATEGORIES,
    SKILL_NAMES,
    Calendar,
    Finance,
    HistoryEntry,
    Job,
    Player,
    Skills,
)
from finsim.utils.math_utils import format_money, round_half_up
from finsim.world.catalogs import BASE_EXPENSES, JOB_TYPES, LOCATIONS, RANDOM_EVENTS, Location

logger = logging.getLogger(__name__)

# Job hunting
QUALIFIED_BONUS = 0.3
NETWORKING_BONUS_PER_LEVEL = 0.05
JOB_VISIBILITY_THRESHOLD = 0.5

# Salary
EDUCATION_SALARY_BONUS = 0.05
EXPERIENCE_SALARY_BONUS = 0.03
SALARY_RANDOM_MIN = 0.9
SALARY_RANDOM_SPAN = 0.2

# Raises
RAISE_BASE_CHANCE = 0.05
RAISE_CHANCE_PER_MONTH_WORKED = 0.002
RAISE_CHANCE_PER_EXPERIENCE = 0.01
RAISE_CHANCE_PER_NETWORKING = 0.01
RAISE_MIN_PERCENT = 0.03
RAISE_PERCENT_SPAN = 0.05

SKILL_COST_PER_LEVEL = 500


class LocationNotSetError(RuntimeError):
    """Raised when a location-dependent rule runs before a location is chosen."""


@dataclass(frozen=True)
class MonthOutcome:
    """Result of a single simulated month."""

    is_broke: bool
    month: int
    year: int


class FinancialSimulation:
    """
    In-memory game engine. Not safe for concurrent use; callers must
    serialize operations themselves.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.event_bus = EventBus(self.config)
        self.rng = rng if rng is not None else self._create_rng()

        self.player: Player
        self.calendar: Calendar
        self.difficulty: str
        self._apply_default_state()

    def _create_rng(self) -> np.random.Generator:
        seed = self.config.random_seed
        if seed is not None:
            logger.info(f"Seeding simulation RNG with: {seed}")
            return np.random.default_rng(seed)
        logger.debug("No random_seed provided; simulation will not be reproducible.")
        return np.random.default_rng()

    def _apply_default_state(self) -> None:
        skills = self.config.initial_skills
        self.player = Player(
            skills=Skills(
                education=skills.education,
                experience=skills.experience,
                networking=skills.networking,
            ),
            finance=Finance(savings=self.config.starting_savings),
        )
        self.calendar = Calendar(month=self.config.start_month, year=self.config.start_year)
        self.difficulty = self.config.difficulty

    # Notifications

    def subscribe(self, event_type: Union[GameEvent, str], handler: EventHandler) -> None:
        """Registers a handler for a notification. There is no unsubscribe."""
        self.event_bus.subscribe(event_type, handler)

    def attach_observer(self, observer: SimulationObserver) -> None:
        observer.attach(self.event_bus)

    # Calendar

    @property
    def month(self) -> int:
        return self.calendar.month

    @property
    def year(self) -> int:
        return self.calendar.year

    def _add_to_history(self, entry: str) -> None:
        self.player.history.append(HistoryEntry(month=self.calendar.month, year=self.calendar.year, entry=entry))

    def _current_location(self) -> Optional[Location]:
        if self.player.location is None:
            return None
        return LOCATIONS[self.player.location]

    # Configuration

    def set_location(self, location_name: str) -> bool:
        """
        Moves the player and resets the location-driven expenses.

        Housing takes the location's base cost and the remaining categories
        are recomputed from their base amounts and the location's cost
        multiplier. Returns False for an unknown location.
        """
        location = LOCATIONS.get(location_name)
        if location is None:
            logger.debug(f"Rejected unknown location '{location_name}'")
            return False

        self.player.location = location.name
        self.player.expenses.housing = location.housing_cost
        self._update_basic_expenses(location)

        logger.info(f"Player moved to {location.name}")
        self.event_bus.publish(GameEvent.LOCATION_CHANGED, location.name)
        return True

    def _update_basic_expenses(self, location: Location) -> None:
        for category, base_amount in BASE_EXPENSES.items():
            setattr(self.player.expenses, category, round_half_up(base_amount * location.cost_multiplier))

    def update_expense(self, category: str, amount: float) -> bool:
        if category not in EXPENSE_CATEGORIES:
            logger.debug(f"Rejected expense update {category}={amount}")
            return False

        setattr(self.player.expenses, category, amount)
        self.event_bus.publish(
            GameEvent.EXPENSE_UPDATED,
            ExpenseUpdated(
                category=category,
                amount=amount,
                total_expenses=self.calculate_total_monthly_expenses(),
            ),
        )
        return True

    # Career

    def get_available_jobs(self) -> List[JobOffer]:
        """
        Rolls which catalog jobs are on offer this time.

        Each job's score is a random draw scaled by the location's job
        opportunities, plus a bonus for meeting its requirements and a bonus
        per networking level. Jobs scoring above the threshold are offered at
        a freshly calculated salary.
        """
        location = self._current_location()
        if location is None:
            logger.warning("Job search attempted before a location was set")
            return []

        skills = self.player.skills
        available_jobs: List[JobOffer] = []

        for job_type in JOB_TYPES.values():
            education_met = skills.education >= job_type.education_requirement
            experience_met = skills.experience >= job_type.experience_requirement

            chance = self.rng.random() * location.job_opportunities
            qualified_bonus = QUALIFIED_BONUS if (education_met and experience_met) else 0.0
            networking_bonus = skills.networking * NETWORKING_BONUS_PER_LEVEL

            if chance + qualified_bonus + networking_bonus > JOB_VISIBILITY_THRESHOLD:
                available_jobs.append(
                    JobOffer(
                        title=job_type.title,
                        education_requirement=job_type.education_requirement,
                        experience_requirement=job_type.experience_requirement,
                        base_salary=job_type.base_salary,
                        description=job_type.description,
                        adjusted_salary=self.calculate_salary(job_type.base_salary),
                    )
                )

        logger.debug(f"{len(available_jobs)} job(s) available in {location.name}")
        self.event_bus.publish(GameEvent.JOBS_AVAILABLE, available_jobs)
        return available_jobs

    def calculate_salary(self, base_salary: float) -> int:
        location = self._current_location()
        if location is None:
            raise LocationNotSetError("A location must be set before salaries can be calculated.")

        skills = self.player.skills
        skill_bonus = 1 + skills.education * EDUCATION_SALARY_BONUS + skills.experience * EXPERIENCE_SALARY_BONUS
        random_factor = SALARY_RANDOM_MIN + self.rng.random() * SALARY_RANDOM_SPAN

        return round_half_up(base_salary * location.salary_multiplier * skill_bonus * random_factor)

    def accept_job(self, job_title: str) -> bool:
        job_type = JOB_TYPES.get(job_title)
        if job_type is None:
            logger.debug(f"Rejected unknown job title '{job_title}'")
            return False
        if self.player.location is None:
            logger.warning(f"Cannot accept '{job_title}' before a location is set")
            return False

        job = Job(title=job_type.title, salary=self.calculate_salary(job_type.base_salary))
        self.player.job = job
        self.player.finance.salary = job.salary

        self._add_to_history(f"Got a job as {job.title} with annual salary of ${format_money(job.salary)}")
        logger.info(f"Player accepted '{job.title}' at {job.salary}")
        self.event_bus.publish(GameEvent.JOB_ACCEPTED, job)
        return True

    def try_for_raise(self) -> int:
        """
        Gives the player a chance at a raise. Returns the raise amount, or 0.

        The chance grows with tenure, experience and networking and has no
        upper bound, so a long enough career makes a raise certain.
        """
        job = self.player.job
        if job is None:
            return 0

        skills = self.player.skills
        chance = (
            RAISE_BASE_CHANCE
            + job.months_worked * RAISE_CHANCE_PER_MONTH_WORKED
            + skills.experience * RAISE_CHANCE_PER_EXPERIENCE
            + skills.networking * RAISE_CHANCE_PER_NETWORKING
        )

        if self.rng.random() >= chance:
            return 0

        raise_percent = RAISE_MIN_PERCENT + self.rng.random() * RAISE_PERCENT_SPAN
        old_salary = self.player.finance.salary
        new_salary = round_half_up(old_salary * (1 + raise_percent))
        self.player.finance.salary = new_salary
        job.salary = new_salary

        raise_amount = new_salary - old_salary
        self._add_to_history(f"Got a raise of ${format_money(raise_amount)} ({raise_percent * 100:.1f}%)")
        logger.info(f"Raise granted: {old_salary} -> {new_salary}")
        self.event_bus.publish(
            GameEvent.GOT_RAISE,
            RaiseGranted(old_salary=old_salary, new_salary=new_salary, raise_percent=raise_percent),
        )
        return raise_amount

    # Time & money

    def process_month(self) -> MonthOutcome:
        """Runs one month: pay, raise attempt, expenses, a random event, then the calendar."""
        finance = self.player.finance

        # The summary reports the monthly pay at the salary in force after
        # this month's raise attempt; the credit uses the salary before it.
        income = 0
        if self.player.job is not None:
            finance.savings += round_half_up(finance.salary / 12)
            self.player.job.months_worked += 1
            self.try_for_raise()
            income = round_half_up(finance.salary / 12)

        monthly_expenses = self.calculate_total_monthly_expenses()
        finance.savings -= monthly_expenses

        self.process_random_event()

        self.calendar.advance()

        is_broke = finance.savings < 0
        self._add_to_history(
            f"Month {self.calendar.month}, Year {self.calendar.year}: "
            f"Income ${format_money(income)}, "
            f"Expenses ${format_money(monthly_expenses)}, "
            f"Savings ${format_money(finance.savings)}"
        )
        if is_broke:
            logger.info(f"Player is broke at month {self.calendar.month}, year {self.calendar.year}")

        self.event_bus.publish(
            GameEvent.MONTH_PROCESSED,
            MonthSummary(
                month=self.calendar.month,
                year=self.calendar.year,
                income=income,
                expenses=monthly_expenses,
                savings=finance.savings,
                is_broke=is_broke,
            ),
        )
        return MonthOutcome(is_broke=is_broke, month=self.calendar.month, year=self.calendar.year)

    def process_random_event(self) -> Optional[RandomEventOccurred]:
        """Fires at most one catalog event; earlier entries win."""
        for event_def in RANDOM_EVENTS:
            if self.rng.random() < event_def.probability:
                cost = event_def.cost.resolve(self.player)
                self.player.finance.savings -= cost

                outcome = "Gained" if cost < 0 else "Cost"
                self._add_to_history(
                    f"Random event: {event_def.name} - {event_def.description} "
                    f"({outcome} ${format_money(abs(cost))})"
                )
                logger.info(f"Random event '{event_def.name}' with cost {cost}")

                occurred = RandomEventOccurred(name=event_def.name, description=event_def.description, cost=cost)
                self.event_bus.publish(GameEvent.RANDOM_EVENT, occurred)
                return occurred
        return None

    def calculate_total_monthly_expenses(self) -> float:
        return self.player.expenses.total()

    # Skills

    def improve_skill(self, skill_name: str, amount: int = 1) -> bool:
        """Pays for training. Each level costs more than the one before."""
        if skill_name not in SKILL_NAMES or amount < 1:
            logger.debug(f"Rejected skill improvement {skill_name} x{amount}")
            return False

        current_level = getattr(self.player.skills, skill_name)
        cost = SKILL_COST_PER_LEVEL * amount * (current_level + 1)
        if self.player.finance.savings < cost:
            logger.debug(f"Cannot afford {skill_name} training costing {cost}")
            return False

        self.player.finance.savings -= cost
        new_level = current_level + amount
        setattr(self.player.skills, skill_name, new_level)

        self._add_to_history(f"Improved {skill_name} skill to level {new_level} (Cost: ${format_money(cost)})")
        self.event_bus.publish(
            GameEvent.SKILL_IMPROVED,
            SkillImproved(skill=skill_name, new_level=new_level, cost=cost),
        )
        return True

    # Lifecycle

    def get_game_state(self) -> GameSnapshot:
        """Returns a detached copy of the whole game state."""
        return GameSnapshot(
            player=self.player.model_copy(deep=True),
            month=self.calendar.month,
            year=self.calendar.year,
            difficulty=self.difficulty,
        )

    def load_game_state(self, state: Union[GameSnapshot, Mapping[str, Any]]) -> None:
        """
        Replaces the whole game state with a snapshot.

        Raises:
            ValueError: If the snapshot is malformed. The current state is
                        left untouched.
        """
        try:
            snapshot = (
                GameSnapshot.model_validate(state.model_dump())
                if isinstance(state, GameSnapshot)
                else GameSnapshot.model_validate(state)
            )
        except ValidationError as e:
            raise ValueError(f"Data validation error when loading game state: {e}")

        # Model instances nested in a mapping are not revalidated, so copy.
        self.player = snapshot.player.model_copy(deep=True)
        self.calendar = Calendar(month=snapshot.month, year=snapshot.year)
        self.difficulty = snapshot.difficulty

        logger.info(f"Game state loaded at month {self.calendar.month}, year {self.calendar.year}")
        self.event_bus.publish(GameEvent.GAME_LOADED, self.get_game_state())

    def reset_game(self) -> None:
        """Restores the starting state. Subscriptions and the RNG are kept."""
        self._apply_default_state()
        logger.info("Game reset to defaults")
        self.event_bus.publish(GameEvent.GAME_RESET, None)

    def save_state(self, store: StateStore) -> None:
        store.save(self.get_game_state())

    def load_state(self, store: StateStore) -> None:
        self.load_game_state(store.load())
