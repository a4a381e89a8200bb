# src/finsim/world/__init__.py
"""Immutable reference data: locations, job types and random events."""

from .catalogs import (
    BASE_EXPENSES,
    JOB_TYPES,
    LOCATIONS,
    RANDOM_EVENTS,
    FixedCost,
    JobType,
    Location,
    PercentOfSalaryCost,
    RandomEventDef,
)

__all__ = [
    "BASE_EXPENSES",
    "JOB_TYPES",
    "LOCATIONS",
    "RANDOM_EVENTS",
    "FixedCost",
    "JobType",
    "Location",
    "PercentOfSalaryCost",
    "RandomEventDef",
]
