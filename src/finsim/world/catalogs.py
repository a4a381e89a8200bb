# src/finsim/world/catalogs.py
"""
Static reference data for the simulation world.

Every table here is built once at import time from frozen pydantic models and
exposed through read-only containers, so the catalogs are shared by all
engine instances and can never be mutated at runtime.
"""

from types import MappingProxyType
from typing import TYPE_CHECKING, Annotated, Literal, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from finsim.simulation.state import Player


class Location(BaseModel):
    """An economic region the player can live in."""

    model_config = ConfigDict(frozen=True)

    name: str
    cost_multiplier: float = Field(..., gt=0.0)
    job_opportunities: float = Field(..., ge=0.0)
    salary_multiplier: float = Field(..., gt=0.0)
    housing_cost: int = Field(..., ge=0)
    description: str


class JobType(BaseModel):
    """A kind of job, with the skill levels needed to qualify for it."""

    model_config = ConfigDict(frozen=True)

    title: str
    education_requirement: int = Field(..., ge=0)
    experience_requirement: int = Field(..., ge=0)
    base_salary: int = Field(..., gt=0)
    description: str


class FixedCost(BaseModel):
    """A cost that is always the same amount. Negative amounts are income."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    amount: float

    def resolve(self, player: "Player") -> float:
        return self.amount


class PercentOfSalaryCost(BaseModel):
    """A cost proportional to the player's current annual salary."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["percent_of_salary"] = "percent_of_salary"
    rate: float

    def resolve(self, player: "Player") -> float:
        return player.finance.salary * self.rate


EventCost = Annotated[Union[FixedCost, PercentOfSalaryCost], Field(discriminator="kind")]


class RandomEventDef(BaseModel):
    """A random life event that may hit the player's savings in a given month."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    cost: EventCost
    probability: float = Field(..., ge=0.0, le=1.0)


LOCATIONS: Mapping[str, Location] = MappingProxyType(
    {
        location.name: location
        for location in (
            Location(
                name="Big City",
                cost_multiplier=1.5,
                job_opportunities=1.2,
                salary_multiplier=1.3,
                housing_cost=1500,
                description="High cost of living but better job opportunities and salaries.",
            ),
            Location(
                name="Suburb",
                cost_multiplier=1.2,
                job_opportunities=1.0,
                salary_multiplier=1.1,
                housing_cost=1200,
                description="Balanced cost of living and job opportunities.",
            ),
            Location(
                name="Small Town",
                cost_multiplier=0.8,
                job_opportunities=0.7,
                salary_multiplier=0.8,
                housing_cost=800,
                description="Lower cost of living but fewer job opportunities and lower salaries.",
            ),
            Location(
                name="Rural Area",
                cost_multiplier=0.6,
                job_opportunities=0.5,
                salary_multiplier=0.7,
                housing_cost=600,
                description="Very low cost of living but limited job opportunities.",
            ),
        )
    }
)

JOB_TYPES: Mapping[str, JobType] = MappingProxyType(
    {
        job.title: job
        for job in (
            JobType(
                title="Entry Level Office",
                education_requirement=1,
                experience_requirement=0,
                base_salary=30000,
                description="Basic office job with minimal requirements.",
            ),
            JobType(
                title="Retail",
                education_requirement=0,
                experience_requirement=0,
                base_salary=25000,
                description="Customer service role with no formal requirements.",
            ),
            JobType(
                title="Skilled Trade",
                education_requirement=1,
                experience_requirement=1,
                base_salary=45000,
                description="Specialized skills with some experience required.",
            ),
            JobType(
                title="Professional",
                education_requirement=2,
                experience_requirement=1,
                base_salary=60000,
                description="Professional position requiring education and experience.",
            ),
            JobType(
                title="Management",
                education_requirement=2,
                experience_requirement=3,
                base_salary=80000,
                description="Leadership position with significant experience required.",
            ),
            JobType(
                title="Executive",
                education_requirement=3,
                experience_requirement=5,
                base_salary=120000,
                description="Top-level position with extensive requirements.",
            ),
        )
    }
)

# Order matters: at most one event fires per month and the scan stops at the
# first hit, so earlier entries take priority.
RANDOM_EVENTS: Tuple[RandomEventDef, ...] = (
    RandomEventDef(
        name="Car Breakdown",
        description="Your car needs repairs.",
        cost=FixedCost(amount=800),
        probability=0.05,
    ),
    RandomEventDef(
        name="Medical Emergency",
        description="Unexpected medical bills.",
        cost=FixedCost(amount=1200),
        probability=0.03,
    ),
    RandomEventDef(
        name="Tax Refund",
        description="You received a tax refund!",
        cost=FixedCost(amount=-500),
        probability=0.04,
    ),
    RandomEventDef(
        name="Family Emergency",
        description="You need to help a family member.",
        cost=FixedCost(amount=600),
        probability=0.03,
    ),
    RandomEventDef(
        name="Bonus",
        description="You received a performance bonus!",
        cost=PercentOfSalaryCost(rate=-0.05),
        probability=0.06,
    ),
)

# Monthly amounts before the location's cost multiplier is applied.
BASE_EXPENSES: Mapping[str, int] = MappingProxyType(
    {
        "food": 400,
        "utilities": 200,
        "transportation": 300,
        "entertainment": 200,
        "other": 100,
    }
)
